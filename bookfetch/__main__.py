import sys

from bookfetch.cli import main

sys.exit(main())
