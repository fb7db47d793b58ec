"""
Entry point for running the xgo CLI as a module.

Usage: python -m xgokit.cli [options] <go import path>
"""

from .parser import main

if __name__ == "__main__":
    main()
