import sys

from testgen_engine.cli import main

sys.exit(main())
