import sys

from assistkit.cli.main import main

sys.exit(main())
