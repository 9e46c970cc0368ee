import sys

from envload.cli import main

sys.exit(main())
