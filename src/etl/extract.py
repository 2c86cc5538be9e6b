"""Data extraction layer for the student spreadsheet.

Fetches the workbook with a single GET (or from a local path) and decodes
its first sheet into rows. Errors are translated into LookupDataError
subclasses for the loader boundary to handle.
"""

from io import BytesIO
from pathlib import Path

import polars as pl
import requests
from loguru import logger

from src.core.domain_models import Row
from src.core.exceptions import SpreadsheetDecodeError, SpreadsheetDownloadError


def is_remote(source: str) -> bool:
    return source.startswith(("http://", "https://"))


class SpreadsheetExtractor:
    """Handles fetching and decoding of the source workbook."""

    def __init__(self, timeout: float | None = None) -> None:
        """
        Args:
            timeout: Seconds to wait for the download; None waits indefinitely
        """
        self.timeout = timeout

    def download(self, url: str) -> bytes:
        """
        Fetch the raw workbook bytes with one unauthenticated GET.
        No retry; any transport error or non-2xx status is raised.
        """
        logger.info(f"Downloading spreadsheet from {url}")
        try:
            response = requests.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise SpreadsheetDownloadError(f"Download failed for {url}: {e}") from e

        logger.debug(f"Downloaded {len(response.content):,} bytes")
        return response.content

    def read_file(self, path: Path) -> bytes:
        """Read workbook bytes from a local file."""
        logger.info(f"Reading spreadsheet from {path}")
        try:
            return path.read_bytes()
        except OSError as e:
            raise SpreadsheetDownloadError(f"Cannot read {path}: {e}") from e

    def read_rows(self, content: bytes) -> list[Row]:
        """
        Decode workbook bytes into rows of the first sheet.

        The header row defines the keys. Every cell is read as text so values
        reach the UI exactly as typed; empty cells become None. Empty columns
        are kept so the header set matches the sheet.

        Raises:
            SpreadsheetDecodeError: If the bytes are not a workbook or the sheet is empty
        """
        try:
            df = pl.read_excel(
                BytesIO(content),
                sheet_id=1,
                engine="calamine",
                has_header=True,
                infer_schema_length=0,
                drop_empty_rows=True,
                drop_empty_cols=False,
                raise_if_empty=True,
            )
        except Exception as e:
            raise SpreadsheetDecodeError(f"Could not decode workbook: {e}") from e

        rows = df.rows(named=True)
        logger.info(f"Decoded {len(rows):,} rows with columns {df.columns}")
        return rows

    def fetch_rows(self, source: str) -> list[Row]:
        """Fetch and decode the workbook from a URL or a local path."""
        if is_remote(source):
            content = self.download(source)
        else:
            content = self.read_file(Path(source))
        return self.read_rows(content)
