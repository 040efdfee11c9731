import sys

from toolgate.cli import main

sys.exit(main())
