import sys

from weatherbrief.cli import main

sys.exit(main())
