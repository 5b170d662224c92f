"""
Main entry point for the git mirror tool.
"""

import sys

from git_mirror.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
