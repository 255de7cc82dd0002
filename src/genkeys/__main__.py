import sys

from genkeys.cli.main import main

sys.exit(main())
