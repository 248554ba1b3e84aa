import sys

from console2048.cli import main

sys.exit(main())
