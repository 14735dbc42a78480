import sys

from raijin.cli import main

sys.exit(main())
