"""Pydantic schemas for runtime validation of conversion inputs."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ConversionRequestConfig(BaseModel):
    """Validated CLI/API conversion request."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    output_format: str
    input_arguments: tuple[str, ...] = Field(min_length=1)

    @field_validator("output_format")
    @classmethod
    def _validate_format(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("output_format cannot be empty.")
        return value

    @field_validator("input_arguments")
    @classmethod
    def _validate_arguments(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if any(not item for item in value):
            raise ValueError("input arguments cannot contain empty entries.")
        return value


class BatchOptionsConfig(BaseModel):
    """Validated batch execution options."""

    model_config = ConfigDict(extra="forbid")

    base_dir: Path
    workers: int = Field(default=1, ge=1)
    jpeg_quality: int = Field(default=75, ge=1, le=95)

