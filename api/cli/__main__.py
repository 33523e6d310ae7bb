"""CLI entry point for running as `python -m api.cli`.

Usage:
    python -m api.cli                       # ingest faqs.json, then prompt
    python -m api.cli --query "What is X?"  # ingest, then answer directly
    python -m api.cli --skip-ingest         # search only
"""

import sys

from .app import main


if __name__ == "__main__":
    sys.exit(main())
