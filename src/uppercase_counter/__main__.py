import sys

from uppercase_counter.cli import main

sys.exit(main())
