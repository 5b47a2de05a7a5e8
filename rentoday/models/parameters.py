"""Run configuration data models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FileAction(str, Enum):
    """What to rename: one file or the matches of a directory pattern."""

    RENAME_FILE = "file"
    RENAME_DIRECTORY = "directory"


class Parameters(BaseModel):
    """Validated command line parameters. Built once, never mutated."""

    model_config = ConfigDict(frozen=True)

    file_action: FileAction = Field(description="Rename a single file or all matches in a directory")
    source: str = Field(description="File path, or directory plus file pattern (e.g. 'data/*.txt')")
    overwrite: bool = Field(default=False, description="Replace existing files with the generated name")
    prefix: str | None = Field(
        default=None,
        description="File name prefix; '*' is replaced by the original base name",
    )
    recurse_subdirectories: bool = Field(
        default=False,
        description="Also rename matches in subdirectories (directory mode only)",
    )

    @field_validator("source")
    @classmethod
    def _source_not_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("source must not be empty")
        return value

    @property
    def source_file(self) -> str | None:
        return self.source if self.file_action == FileAction.RENAME_FILE else None

    @property
    def source_pattern(self) -> str | None:
        return self.source if self.file_action == FileAction.RENAME_DIRECTORY else None

    @property
    def has_prefix(self) -> bool:
        return self.prefix is not None and len(self.prefix.strip()) > 0

    def __str__(self) -> str:
        return (
            f"Parameters({self.file_action.value}='{self.source}', overwrite={self.overwrite}, "
            f"prefix={self.prefix!r}, recurse={self.recurse_subdirectories})"
        )
