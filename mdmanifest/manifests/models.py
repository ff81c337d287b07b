"""Pydantic models describing manifest structures."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ManifestItem(BaseModel):
    """A file to be materialized by the bootstrap process."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(min_length=1, description="Relative path of the target file.")
    content: str = Field(min_length=1, description="Exact text body written to the target file.")
