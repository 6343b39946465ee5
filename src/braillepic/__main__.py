import sys

from braillepic.cli import main

sys.exit(main())
