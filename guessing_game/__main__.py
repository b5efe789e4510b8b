import sys

from guessing_game.app import main

if __name__ == "__main__":
    sys.exit(main())
