import sys

from labyrinth.main import main

sys.exit(main())
