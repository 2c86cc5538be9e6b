from pathlib import Path

import pytest
import requests

from src.core.domain_models import Row
from src.core.exceptions import SpreadsheetDecodeError, SpreadsheetDownloadError
from src.etl.extract import SpreadsheetExtractor, is_remote


class FakeResponse:
    def __init__(self, content: bytes, status_code: int = 200) -> None:
        self.content = content
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


def test_read_rows_decodes_first_sheet(workbook_path: Path, student_rows: list[Row]) -> None:
    rows = SpreadsheetExtractor().read_rows(workbook_path.read_bytes())
    assert rows == student_rows


def test_read_rows_rejects_garbage() -> None:
    with pytest.raises(SpreadsheetDecodeError):
        SpreadsheetExtractor().read_rows(b"definitely not a workbook")


def test_download_single_get(monkeypatch: pytest.MonkeyPatch, workbook_path: Path) -> None:
    calls: list[tuple[str, float | None]] = []

    def fake_get(url: str, timeout: float | None = None) -> FakeResponse:
        calls.append((url, timeout))
        return FakeResponse(workbook_path.read_bytes())

    monkeypatch.setattr("src.etl.extract.requests.get", fake_get)

    content = SpreadsheetExtractor().download("https://example.org/file.xlsx")

    assert content == workbook_path.read_bytes()
    assert calls == [("https://example.org/file.xlsx", None)]


def test_download_http_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        "src.etl.extract.requests.get",
        lambda url, timeout=None: FakeResponse(b"", status_code=404),
    )

    with pytest.raises(SpreadsheetDownloadError):
        SpreadsheetExtractor().download("https://example.org/missing.xlsx")


def test_download_connection_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def fail(url: str, timeout: float | None = None) -> FakeResponse:
        raise requests.ConnectionError("unreachable")

    monkeypatch.setattr("src.etl.extract.requests.get", fail)

    with pytest.raises(SpreadsheetDownloadError):
        SpreadsheetExtractor().download("https://example.org/file.xlsx")


def test_timeout_is_passed_through(monkeypatch: pytest.MonkeyPatch, workbook_path: Path) -> None:
    seen: list[float | None] = []

    def fake_get(url: str, timeout: float | None = None) -> FakeResponse:
        seen.append(timeout)
        return FakeResponse(workbook_path.read_bytes())

    monkeypatch.setattr("src.etl.extract.requests.get", fake_get)
    SpreadsheetExtractor(timeout=12.5).fetch_rows("https://example.org/file.xlsx")

    assert seen == [12.5]


def test_fetch_rows_from_local_path(workbook_path: Path, student_rows: list[Row]) -> None:
    assert SpreadsheetExtractor().fetch_rows(str(workbook_path)) == student_rows


def test_fetch_rows_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SpreadsheetDownloadError):
        SpreadsheetExtractor().fetch_rows(str(tmp_path / "nope.xlsx"))


def test_is_remote() -> None:
    assert is_remote("https://drive.google.com/uc?id=1")
    assert is_remote("http://host/file.xlsx")
    assert not is_remote("data/file.xlsx")
