"""Rename operation data models."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class RenameStatus(str, Enum):
    RENAMED = "renamed"
    SKIPPED = "skipped"
    FAILED = "failed"


class RenameOutcome(BaseModel):
    """Result of renaming a single file."""

    source: Path = Field(description="Original file path")
    destination: Path = Field(description="Generated file path")
    status: RenameStatus = Field(description="What happened to the file")
    error: str | None = Field(default=None, description="Underlying cause when the rename failed")

    @property
    def succeeded(self) -> bool:
        return self.status == RenameStatus.RENAMED

    def __str__(self) -> str:
        return f"RenameOutcome('{self.source}' -> '{self.destination}', status={self.status.value})"
