import sys

from matrix_reloaded.cli import main

sys.exit(main())
