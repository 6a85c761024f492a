import sys

from asciicreator.cli import main

sys.exit(main())
