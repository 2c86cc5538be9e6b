"""Exception hierarchy for spreadsheet loading and indexing.

All of these are raised below the loader boundary and caught there;
pages never see them directly.
"""


class LookupDataError(Exception):
    """Base class for failures while preparing the lookup index."""


class SpreadsheetDownloadError(LookupDataError):
    """The spreadsheet could not be fetched from its source."""


class SpreadsheetDecodeError(LookupDataError):
    """The fetched bytes are not a readable workbook, or the sheet is empty."""


class MissingIdentifierColumnError(LookupDataError):
    """The header row has no column matching the identifier column name."""

    def __init__(self, column: str, available: list[str]) -> None:
        self.column = column
        self.available = available
        super().__init__(f"Column '{column}' not found in header: {available}")
