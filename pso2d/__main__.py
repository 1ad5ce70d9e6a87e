import sys

from pso2d.cli import main

sys.exit(main())
