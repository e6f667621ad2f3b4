"""
Export module.

Serializes ordered result sequences to CSV text.
"""

from .csv_exporter import CSV_COLUMNS, to_csv, write_csv

__all__ = ['CSV_COLUMNS', 'to_csv', 'write_csv']
