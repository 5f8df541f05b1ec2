import sys

from pico.repl import main

sys.exit(main())
