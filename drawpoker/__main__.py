import sys

from drawpoker.cli import main

sys.exit(main())
