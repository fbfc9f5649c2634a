"""Movie Collection Browser.

Loads the CSV exports of several movie collections, merges them, and lets
the user search, filter, sort and inspect the records.
"""

__version__ = "0.1.0"
