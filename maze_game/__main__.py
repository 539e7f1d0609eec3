import sys

from maze_game.cli import main

sys.exit(main())
