from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, field_validator

CONFIG_FILENAME = "mdmanifest.yml"


class MergeConfig(BaseModel):
    """Settings controlling document discovery and output serialization."""

    document_suffix: str = Field(
        default=".md",
        description="Filename suffix identifying manifest documents (matched case-sensitively).",
    )
    encoding: str = Field(default="utf-8", description="Text encoding of manifest documents.")
    decode_errors: Literal["replace", "strict", "ignore"] = Field(
        default="replace",
        description="Handling of undecodable bytes; 'strict' makes such documents fail to load.",
    )
    indent: int = Field(default=2, ge=0, description="Indentation width of the merged JSON output.")
    ensure_ascii: bool = Field(
        default=False,
        description="Escape non-ASCII characters in the merged JSON output.",
    )

    @field_validator("document_suffix")
    def _normalize_suffix(cls, value: str) -> str:
        text = value.strip()
        if not text:
            return ".md"
        if not text.startswith("."):
            text = f".{text}"
        return text


def load_config(path: str | Path) -> MergeConfig:
    """Load merge settings from a YAML file.

    The ``path`` argument may point to a file or to a directory containing
    ``mdmanifest.yml``. A directory without that file yields the defaults.
    """
    candidate = Path(path)
    data: Any = {}
    if candidate.is_dir():
        config_file = candidate / CONFIG_FILENAME
        if config_file.exists():
            with config_file.open("r", encoding="utf-8") as handle:
                data = yaml.safe_load(handle) or {}
    elif candidate.exists():
        with candidate.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
    else:
        raise FileNotFoundError(candidate)

    if not isinstance(data, dict):
        raise ValueError(f"Configuration in {candidate} must be a mapping.")
    return MergeConfig(**data)
