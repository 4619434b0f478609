import sys

from klisp.repl import main

sys.exit(main())
