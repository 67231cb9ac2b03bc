import sys

from wxservice.cli import main

sys.exit(main())
