import sys

from clickstories.cli import main

sys.exit(main())
