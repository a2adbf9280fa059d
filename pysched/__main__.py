"""Allow running PySched with `python -m pysched`."""

import sys

from pysched.main import main


sys.exit(main())
