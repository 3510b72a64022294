import sys

from route_splitter.cli import main

sys.exit(main())
