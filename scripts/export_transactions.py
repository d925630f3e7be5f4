#!/usr/bin/env python3
"""
Export Ronin wallet transactions to JSON.

CLI wrapper script for the exporter.

Usage:
    python scripts/export_transactions.py
    python scripts/export_transactions.py \\
        --address ronin:0123456789abcdef0123456789abcdef01234567 \\
        --output-dir data/exports

The address is prompted for interactively when --address is omitted.
"""

from ronin_export.cli import main

if __name__ == "__main__":
    main()
