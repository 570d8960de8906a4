"""nomencheck IO — folder scanning, sanitization, config and log files."""

from __future__ import annotations

from pathlib import Path

from nomencheck.io._sanitize import sanitize_filename, split_extension
from nomencheck.io.log import build_log, default_log_name, write_log, write_summary_csv
from nomencheck.io.models import IMAGE_EXTENSIONS, CheckConfig, ScanResult
from nomencheck.io.scanner import FileScanner
from nomencheck.io.serialization import config_from_yaml, config_to_yaml

__all__ = [
    "IMAGE_EXTENSIONS",
    "CheckConfig",
    "FileScanner",
    "ScanResult",
    "build_log",
    "config_from_yaml",
    "config_to_yaml",
    "default_log_name",
    "sanitize_filename",
    "scan",
    "split_extension",
    "write_log",
    "write_summary_csv",
]


def scan(
    path: Path,
    config: CheckConfig | None = None,
    files: list[Path] | None = None,
) -> ScanResult:
    """Scan a folder for image files. Convenience wrapper.

    Args:
        path: Folder to scan.
        config: Run settings; supplies extensions and recursion.
            Uses defaults if not provided.
        files: Optional explicit file list (skips folder walking).

    Returns:
        ScanResult with the image files found.
    """
    config = config or CheckConfig()
    return FileScanner(config.extensions).scan(path, recursive=config.recursive, files=files)
