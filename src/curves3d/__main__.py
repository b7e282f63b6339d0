"""Command-line interface."""
import sys

from curves3d.main import main

if __name__ == "__main__":
    sys.exit(main())
