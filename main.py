#!/usr/bin/env python3
"""KeepTime — entry point.

Run with:
    python main.py
    python -m keeptime
"""

from keeptime.__main__ import main


if __name__ == "__main__":
    main()
