import sys
from bswp.cli import main

sys.exit(main())
