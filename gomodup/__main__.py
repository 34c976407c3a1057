import sys

from gomodup.main import main

sys.exit(main())
