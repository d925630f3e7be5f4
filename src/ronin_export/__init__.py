"""
Ronin Transaction Exporter

Command-line utility that exports every transaction involving a Ronin
wallet, together with its decoded input and receipt, to a JSON file
ordered by block number.
"""

__version__ = "0.1.0"
