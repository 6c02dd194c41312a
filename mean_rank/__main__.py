import sys

from mean_rank.cli import main

sys.exit(main())
