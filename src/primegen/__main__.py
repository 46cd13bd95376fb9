import sys

from primegen.cli import main

sys.exit(main())
