import sys

from ollamasearch.cli import main

sys.exit(main())
