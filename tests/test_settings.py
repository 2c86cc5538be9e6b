from pathlib import Path

import pytest
from pydantic import ValidationError

from src.config.settings import load_config
from src.core.config import Settings, settings


def test_shipped_config_loads() -> None:
    config = load_config(settings.config_path)

    assert config.source.id_column == "Stud UID"
    assert config.source.url == (
        "https://drive.google.com/uc?export=download&id=1bfBK0sr8uTexRi6SOhQxepQtNPs3bY_u"
    )
    assert [f.label for f in config.display.fields] == [
        "Form No.",
        "USN No.",
        "Name",
        "Year",
        "Branch",
        "Bus Pickup Point",
    ]
    assert config.display.remark_column == "Remark"


def test_display_defaults_when_omitted(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("source:\n  file_id: abc\n", encoding="utf-8")

    config = load_config(path)

    assert config.source.url.endswith("id=abc")
    assert config.display.fields[1].column == "Stud UID"
    assert config.display.not_found_message == "Bus Facility is not available."


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


def test_url_template_needs_placeholder(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text(
        "source:\n  file_id: abc\n  url_template: https://example.org/static.xlsx\n",
        encoding="utf-8",
    )

    with pytest.raises(ValidationError):
        load_config(path)


def test_empty_field_list_rejected(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("source:\n  file_id: abc\ndisplay:\n  fields: []\n", encoding="utf-8")

    with pytest.raises(ValidationError):
        load_config(path)


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BUS_LOOKUP_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("BUS_LOOKUP_DOWNLOAD_TIMEOUT", "15")

    env_settings = Settings()

    assert env_settings.log_level == "DEBUG"
    assert env_settings.download_timeout == 15.0
    assert (env_settings.assets_dir / "right.svg").exists()
