import sys

from rcv_tally.cli import main

sys.exit(main())
