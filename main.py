"""CLI entrypoint for the symmetric crossword grid generator."""

import sys

from crossgrid.cli import main


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
