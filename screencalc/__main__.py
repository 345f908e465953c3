import sys

from screencalc.cli import main

sys.exit(main())
