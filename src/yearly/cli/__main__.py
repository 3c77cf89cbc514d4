import sys

from yearly.cli.daysto import main

sys.exit(main())
