import sys

from upper_table.cli import main

sys.exit(main())
