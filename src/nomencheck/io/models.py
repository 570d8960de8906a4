"""Data models for the IO module."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from nomencheck.core.models import ReportOptions

# TIFF files and Zeiss microscope output.
IMAGE_EXTENSIONS = (".czi", ".tif", ".tiff", ".lsm")


@dataclass(frozen=True)
class ScanResult:
    """Image files found in a folder, ready to be checked."""

    source_path: Path
    files: list[Path]
    warnings: list[str] = field(default_factory=list)

    @property
    def filenames(self) -> list[str]:
        return [f.name for f in self.files]


@dataclass(frozen=True)
class CheckConfig:
    """Settings for a checking run.

    Attributes:
        verbose: Include a per-section breakdown in every report.
        print_to_screen: Print each report as it is produced.
        write_log: Write the aggregated log file at the end of the run.
        log_dir: Folder for the log file; the checked folder if None.
        extensions: File extensions (with dot) that are checked.
        recursive: Descend into subfolders when scanning.
    """

    verbose: bool = False
    print_to_screen: bool = True
    write_log: bool = True
    log_dir: Path | None = None
    extensions: tuple[str, ...] = IMAGE_EXTENSIONS
    recursive: bool = False

    def __post_init__(self) -> None:
        """Validate and normalize extensions at construction time."""
        if not self.extensions:
            raise ValueError("At least one file extension is required")
        normalized = []
        for ext in self.extensions:
            if not isinstance(ext, str) or not ext.startswith(".") or len(ext) < 2:
                raise ValueError(
                    f"Invalid extension: {ext!r}. Extensions must start with '.'"
                )
            normalized.append(ext.lower())
        object.__setattr__(self, "extensions", tuple(normalized))
        if self.log_dir is not None:
            object.__setattr__(self, "log_dir", Path(self.log_dir))

    @property
    def report_options(self) -> ReportOptions:
        return ReportOptions(verbose=self.verbose)
