import sys

from lingosync.adapters.cli import main

sys.exit(main())
