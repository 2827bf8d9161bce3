import sys

from shortest_route.cli import main

sys.exit(main())
