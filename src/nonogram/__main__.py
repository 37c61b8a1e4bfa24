"""
Run with: python -m nonogram [puzzle.xml]
"""
import sys

from nonogram.main import main

if __name__ == "__main__":
    sys.exit(main())
