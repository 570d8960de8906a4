"""FileScanner — find microscopy image files whose names should be checked."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from nomencheck.io.models import IMAGE_EXTENSIONS, ScanResult

logger = logging.getLogger(__name__)


class FileScanner:
    """Lists image files in a folder by extension."""

    def __init__(self, extensions: Iterable[str] = IMAGE_EXTENSIONS) -> None:
        self.extensions = {ext.lower() for ext in extensions}

    def scan(
        self,
        path: Path,
        recursive: bool = False,
        files: list[Path] | None = None,
    ) -> ScanResult:
        """Scan a folder (or explicit file list) for image files.

        Args:
            path: Folder to scan (used as source_path in result).
            recursive: Also look inside subfolders.
            files: Optional explicit list of file paths. When provided,
                the folder is not walked and only files with a matching
                extension are kept.

        Returns:
            ScanResult with the matching files sorted by name. An empty
            result is not an error.

        Raises:
            FileNotFoundError: If path does not exist (when files is None).
            ValueError: If path is not a directory (when files is None).
        """
        path = Path(path)
        warnings: list[str] = []

        if files is not None:
            found = []
            for f in files:
                f = Path(f)
                if self._matches(f):
                    found.append(f)
                else:
                    warnings.append(f"Skipped {f.name}: not an image file")
        else:
            if not path.exists():
                raise FileNotFoundError(f"Source path does not exist: {path}")
            if not path.is_dir():
                raise ValueError(f"Source path is not a directory: {path}")
            found = self._find_images(path, recursive, warnings)

        found = sorted(found, key=lambda p: (p.name, str(p)))
        logger.debug("Found %d image files in %s", len(found), path)
        return ScanResult(source_path=path, files=found, warnings=warnings)

    def _matches(self, path: Path) -> bool:
        return path.suffix.lower() in self.extensions

    def _find_images(self, path: Path, recursive: bool, warnings: list[str]) -> list[Path]:
        """List image files, skipping directories and symlinks."""
        children = path.rglob("*") if recursive else path.iterdir()
        results = []
        for child in children:
            if child.is_symlink():
                if self._matches(child):
                    warnings.append(f"Skipped symlink {child.name}")
                continue
            if child.is_file() and self._matches(child):
                results.append(child)
        return results
