import sys

from qrgen.cli import main

sys.exit(main())
