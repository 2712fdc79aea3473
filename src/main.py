# src/main.py
import os
import sys

# allow `python src/main.py` without installing the package
here = os.path.dirname(os.path.abspath(__file__))
if here not in sys.path:
    sys.path.insert(0, here)

from reverser.cli import main


if __name__ == "__main__":
    sys.exit(main())
