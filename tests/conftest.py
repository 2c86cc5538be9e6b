"""Shared fixtures: generated workbooks and a throwaway config file."""

from pathlib import Path

import polars as pl
import pytest

from src.config.settings import DisplayConfig
from src.core.domain_models import Row

ASHA: Row = {
    "Form No": None,
    "Stud UID": "1BI20CS001",
    "NAME": "Asha",
    "Year": "3",
    "BRANCH": "CS",
    "Bus Pickup Point": "Gate 2",
    "Remark": None,
}

RAVI: Row = {
    "Form No": "F-102",
    "Stud UID": "1BI21ME014",
    "NAME": "Ravi",
    "Year": "2",
    "BRANCH": "ME",
    "Bus Pickup Point": "Market Road",
    "Remark": "https://example.org/photos/ravi.jpg",
}

CONFIG_YAML = """
source:
  file_id: test-file-id
  id_column: Stud UID
display:
  fields:
    - label: Form No.
      column: Form No
    - label: USN No.
      column: Stud UID
    - label: Name
      column: NAME
    - label: Year
      column: Year
    - label: Branch
      column: BRANCH
    - label: Bus Pickup Point
      column: Bus Pickup Point
  remark_column: Remark
"""


def write_workbook(path: Path, rows: list[Row]) -> Path:
    """Write rows to an .xlsx file with every column typed as text."""
    columns = list(rows[0].keys())
    df = pl.DataFrame(rows, schema={c: pl.String for c in columns})
    df.write_excel(path, autofit=False)
    return path


@pytest.fixture
def student_rows() -> list[Row]:
    return [dict(ASHA), dict(RAVI)]


@pytest.fixture
def workbook_path(tmp_path: Path, student_rows: list[Row]) -> Path:
    return write_workbook(tmp_path / "allocations.xlsx", student_rows)


@pytest.fixture
def workbook_without_id(tmp_path: Path) -> Path:
    rows: list[Row] = [{"USN": "1BI20CS001", "NAME": "Asha"}, {"USN": "1BI21ME014", "NAME": "Ravi"}]
    return write_workbook(tmp_path / "no_id.xlsx", rows)


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(CONFIG_YAML, encoding="utf-8")
    return path


@pytest.fixture
def display() -> DisplayConfig:
    return DisplayConfig()
