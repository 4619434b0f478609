
class KlispError(Exception):
    """ Base class for all klisp errors"""
    pass


class UndefinedVariable(KlispError):
    """ Raised when a symbol is not bound anywhere in the environment chain"""

    def __init__(self, name):
        super().__init__(f"Undefined variable: {name}")
        self.name = str(name)


class KlispTypeError(KlispError):
    """ Raised when an operation receives a value of the wrong shape"""

    def __init__(self, message: str):
        super().__init__(f"Type error: {message}")
        self.message = message


class KlispArityError(KlispError):
    """ Raised when the number of arguments passed to a form or function is incorrect"""

    def __init__(self, expected, got: int):
        super().__init__(f"Arity error: expected {expected}, got {got}")
        self.expected = expected
        self.got = got


class KlispRuntimeError(KlispError):
    """ Raised for evaluation failures not covered by the other errors"""

    def __init__(self, message: str):
        super().__init__(f"Runtime error: {message}")
        self.message = message


class KlispSyntaxError(KlispError):
    """ Raised when program text contains input the reader cannot consume"""

    def __init__(self, message: str, position: int, remaining: str):
        super().__init__(f"{message} at offset {position}: {remaining[:20]!r}")
        self.message = message
        self.position = position
        self.remaining = remaining
