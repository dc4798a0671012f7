"""Command-line interface."""
import sys

from stereotrig.main import main

if __name__ == "__main__":
    sys.exit(main())
