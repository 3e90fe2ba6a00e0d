import sys

from transitnet.check import main

if __name__ == "__main__":
    sys.exit(main())
