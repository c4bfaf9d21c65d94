"""Finding the version source of a project."""

from __future__ import annotations

import os
from pathlib import Path

from bumpr.sources import (
    GalaxySource,
    PackageJsonSource,
    PyProjectSource,
    SourceError,
    VersionFileSource,
    VersionSource,
)

__all__ = ["Detector"]


class Detector:
    """Chooses a version source, checking the known kinds in order of preference."""

    def __init__(self) -> None:
        self.sources: list[VersionSource] = [
            PyProjectSource(),
            PackageJsonSource(),
            GalaxySource(),
            VersionFileSource(),
        ]

    def detect_source(self, project_path: str | os.PathLike[str]) -> tuple[VersionSource, Path]:
        """Return the first source found in project_path and the path of its file."""
        for source in self.sources:
            if source.detect(project_path):
                return source, Path(project_path) / source.default_file_name
        raise SourceError("no version source file found in project")

    def source_for_file(self, file_path: str | os.PathLike[str]) -> VersionSource:
        """Return the source that handles file_path, which must exist."""
        path = Path(file_path)
        try:
            os.stat(path)
        except (OSError, ValueError):
            raise SourceError(f"file does not exist: {file_path}") from None

        file_name = path.name
        for source in self.sources:
            if file_name == source.default_file_name:
                return source

        if file_name in ("galaxy.yml", "galaxy.yaml"):
            return GalaxySource()
        return VersionFileSource()

    def available_sources(self) -> list[str]:
        """Return the names of the supported sources, in order of preference."""
        return [source.name for source in self.sources]