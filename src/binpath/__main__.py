import sys

from binpath.cli import main

sys.exit(main())
