import sys

from nodeboard.main import main

sys.exit(main())
