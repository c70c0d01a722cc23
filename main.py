import sys

from caffparser.cli import main

if __name__ == "__main__":
    # e.g. python main.py -caff animation.caff
    sys.exit(main())
