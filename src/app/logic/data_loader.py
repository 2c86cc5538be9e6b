"""Session data loader for the Streamlit application.

Builds the lookup index for the search page. This is the error boundary for
everything below it: failures are logged and degrade to "index unavailable".
"""

from pathlib import Path

from loguru import logger

from src.config.settings import Config, load_config
from src.core.config import settings
from src.core.domain_models import LookupIndex, SearchState
from src.core.exceptions import LookupDataError
from src.core.mapper import build_lookup_index
from src.etl.extract import SpreadsheetExtractor


class GlobalDataLoader:
    """Loads the configured spreadsheet and builds its lookup index."""

    def __init__(
        self,
        config_path: Path | None = None,
        extractor: SpreadsheetExtractor | None = None,
    ) -> None:
        """Initialize with configuration.

        Args:
            config_path: Path to main configuration file (defaults to settings.config_path)
            extractor: Extractor to use; built from settings when omitted
        """
        self.config: Config = load_config(config_path or settings.config_path)
        self.extractor = extractor or SpreadsheetExtractor(timeout=settings.download_timeout)

    def build_index(self, source: str | None = None) -> LookupIndex:
        """Fetch, decode and index the spreadsheet. Errors propagate.

        Args:
            source: URL or local path; defaults to the configured download URL
        """
        rows = self.extractor.fetch_rows(source or self.config.source.url)
        return build_lookup_index(rows, self.config.source.id_column)

    def load_state(self, source: str | None = None) -> SearchState:
        """Run the one-shot load and return the settled search state.

        Never raises for data problems: the state comes back with
        `index=None` and the loading flag cleared.
        """
        state = SearchState(index=None, is_loading=True)
        try:
            state.index = self.build_index(source)
            logger.success(f"Lookup index ready with {len(state.index)} identifiers")
        except LookupDataError as e:
            logger.error(f"Error loading spreadsheet data: {e}")
        finally:
            state.is_loading = False
        return state
