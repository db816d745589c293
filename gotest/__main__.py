"""Allow running as ``python -m gotest``."""

from gotest.cli import main

main()
