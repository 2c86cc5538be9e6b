"""Configuration management for the bus lookup app.

Centralizes the spreadsheet source and the result-page field layout.
"""

from pathlib import Path
from typing import Any

import yaml
from loguru import logger
from pydantic import BaseModel, Field, field_validator

from src.core.domain_models import ID_COLUMN, NOT_FOUND_MESSAGE


class SourceConfig(BaseModel):
    """Where the spreadsheet lives and which column holds the identifier."""

    file_id: str = Field(description="Google Drive file id of the workbook")
    url_template: str = Field(
        default="https://drive.google.com/uc?export=download&id={file_id}",
        description="Download URL with a {file_id} placeholder",
    )
    id_column: str = Field(default=ID_COLUMN, description="Header of the identifier column")

    @property
    def url(self) -> str:
        """Direct download URL for the workbook."""
        return self.url_template.format(file_id=self.file_id)

    @field_validator("url_template")
    @classmethod
    def validate_url_template(cls, v: str) -> str:
        """Ensure the template can take the file id."""
        if "{file_id}" not in v:
            raise ValueError("url_template must contain a {file_id} placeholder")
        return v


class DisplayField(BaseModel):
    """One labeled line on the result page."""

    label: str
    column: str


def _default_fields() -> list[DisplayField]:
    return [
        DisplayField(label="Form No.", column="Form No"),
        DisplayField(label="USN No.", column="Stud UID"),
        DisplayField(label="Name", column="NAME"),
        DisplayField(label="Year", column="Year"),
        DisplayField(label="Branch", column="BRANCH"),
        DisplayField(label="Bus Pickup Point", column="Bus Pickup Point"),
    ]


class DisplayConfig(BaseModel):
    """Result page layout."""

    fields: list[DisplayField] = Field(default_factory=_default_fields)
    remark_column: str = Field(
        default="Remark", description="Column whose URL value replaces the default photo"
    )
    not_found_message: str = Field(default=NOT_FOUND_MESSAGE)

    @field_validator("fields")
    @classmethod
    def validate_fields(cls, v: list[DisplayField]) -> list[DisplayField]:
        """Ensure at least one field is displayed."""
        if not v:
            raise ValueError("display.fields must list at least one field")
        return v


class Config(BaseModel):
    """Root configuration model."""

    source: SourceConfig
    display: DisplayConfig = Field(default_factory=DisplayConfig)


def load_config(config_path: Path = Path("config/config.yaml")) -> Config:
    """Load configuration from YAML file.

    Args:
        config_path: Path to config.yaml file

    Returns:
        Parsed configuration object

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is malformed
        pydantic.ValidationError: If required keys are missing or invalid
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    logger.info(f"Loading configuration from {config_path}")

    with config_path.open("r") as f:
        raw_config: dict[str, Any] = yaml.safe_load(f) or {}

    config = Config(**raw_config)
    logger.debug(f"Source URL: {config.source.url}")
    logger.debug(f"Result fields: {[f.label for f in config.display.fields]}")

    return config
