import sys

from applaunch.cli import main

sys.exit(main())
