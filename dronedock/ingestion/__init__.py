"""Mini README: Data ingestion helpers for the dock planner.

Convenience exports for reading field and building coordinates from
spreadsheet or CSV files into plain ``Point`` lists.
"""

from .spreadsheet_ingestor import IngestedPoints, SpreadsheetIngestor, parse_row

__all__ = ["IngestedPoints", "SpreadsheetIngestor", "parse_row"]
