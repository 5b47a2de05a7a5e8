"""Timestamp rename processor."""

import time
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from rentoday.models.parameters import Parameters
from rentoday.models.rename import RenameOutcome, RenameStatus
from rentoday.naming import new_file_name


# Pause between renames in a batch. Generated names have millisecond resolution,
# so files renamed within the same millisecond would get the same name.
DEFAULT_RENAME_DELAY_SECONDS = 0.003


class RenameProcessor:
    """Renames files to timestamp based names, one at a time."""

    def __init__(
        self,
        parameters: Parameters,
        console: Console | None = None,
        error_console: Console | None = None,
        clock: Callable[[], datetime] = datetime.now,
        delay: float = DEFAULT_RENAME_DELAY_SECONDS,
    ) -> None:
        """Initialize the rename processor.

        Args:
            parameters: Validated run configuration.
            console: Console for progress output.
            error_console: Console for per-file errors.
            clock: Source of the timestamp embedded in new names.
            delay: Seconds to wait after each rename in directory mode.
        """
        self.parameters = parameters
        self.console = console or Console(soft_wrap=True)
        self.error_console = error_console or Console(stderr=True, soft_wrap=True)
        self.clock = clock
        self.delay = delay

    def _destination_for(self, source: Path) -> Path:
        return new_file_name(source, self.parameters.prefix, now=self.clock())

    def _apply_collision_policy(self, source: Path, destination: Path) -> RenameOutcome:
        """Move source to destination unless the destination exists and overwrite is off.

        Path.replace swaps an existing destination atomically, which also covers a
        destination that shows up between the existence check and the move.
        """
        if destination.exists() and not self.parameters.overwrite:
            self.console.print(f"  Skipping ... {escape(str(destination))} already exists")
            return RenameOutcome(source=source, destination=destination, status=RenameStatus.SKIPPED)

        self.console.print(f"  Renaming {escape(str(source))}")
        self.console.print(f"   -> {escape(str(destination))}")
        try:
            source.replace(destination)
        except OSError as e:
            self.error_console.print(f"[bold red]Error renaming {escape(str(destination))}[/bold red]")
            self.error_console.print(f"  {escape(str(e))}")
            return RenameOutcome(source=source, destination=destination, status=RenameStatus.FAILED, error=str(e))

        return RenameOutcome(source=source, destination=destination, status=RenameStatus.RENAMED)

    def rename_file(self, path: Path) -> RenameOutcome:
        """Rename a single file.

        The caller is expected to have checked that the file exists.

        Args:
            path: File to rename.

        Returns:
            Outcome of the rename.
        """
        self.console.print(f"- Scanning for file {escape(str(path))}")
        return self._apply_collision_policy(path, self._destination_for(path))

    def _find_files(self, folder: Path, file_pattern: str) -> list[Path]:
        """List files matching the pattern, in subdirectories too when recursing.

        The list is built before any rename so renamed files are never matched again.
        """
        matches = folder.rglob(file_pattern) if self.parameters.recurse_subdirectories else folder.glob(file_pattern)
        return sorted(path for path in matches if path.is_file())

    def rename_directory(self, pattern: str) -> int:
        """Rename every file matching a directory pattern.

        Args:
            pattern: Directory plus file pattern, e.g. ``data/*.txt``.

        Returns:
            Number of files renamed.
        """
        pattern_path = Path(pattern)
        folder = pattern_path.parent
        file_pattern = pattern_path.name or "*"

        self.console.print(f"- Scanning folder {escape(str(folder))}")
        if not folder.is_dir():
            self.error_console.print(f"[bold red]Folder {escape(str(folder))} not found.[/bold red]")
            return 0

        file_count = 0
        for path in self._find_files(folder, file_pattern):
            outcome = self._apply_collision_policy(path, self._destination_for(path))
            if outcome.succeeded:
                file_count += 1

            time.sleep(self.delay)

        return file_count
