import sys

from strictcalc.cli import main

sys.exit(main())
