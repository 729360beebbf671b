"""Entry point for running benchparse as a module.

Usage:
    python -m benchparse parse bench.txt
    python -m benchparse parse bench.txt --filter "y==sin(x)"
    python -m benchparse group bench.txt --by y
"""
import sys
from benchparse.cli import main

if __name__ == "__main__":
    sys.exit(main())
