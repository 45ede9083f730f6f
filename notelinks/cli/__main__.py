import sys

from notelinks.cli import main

sys.exit(main())
