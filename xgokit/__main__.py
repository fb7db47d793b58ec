"""
Entry point for running the xgo CLI as a module.

Usage: python -m xgokit [options] <go import path>
"""

from xgokit.cli.parser import main

if __name__ == "__main__":
    main()
