import sys

from mikroformat.cli import main

sys.exit(main())
