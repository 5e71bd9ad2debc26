import sys

from medianamer.cli import main

sys.exit(main())
