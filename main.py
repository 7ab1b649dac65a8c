#!/usr/bin/env python
"""CLI for the NewsAPI client."""

import sys

from newsapi_client.cli import main

if __name__ == "__main__":
    sys.exit(main())
