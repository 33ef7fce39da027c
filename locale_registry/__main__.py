import sys

from locale_registry.cli import main

sys.exit(main())
