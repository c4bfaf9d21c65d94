"""Version sources: files that record a project's version."""

from __future__ import annotations

import abc
import json
import os
import re
import tomllib
from pathlib import Path
from typing import Any, ClassVar

import yaml

__all__ = [
    "SourceError",
    "VersionSource",
    "PyProjectSource",
    "PackageJsonSource",
    "GalaxySource",
    "VersionFileSource",
]


class SourceError(Exception):
    """Raised when a version source cannot be read, parsed or updated."""


def _read(file_path: str | os.PathLike[str]) -> str:
    try:
        data = Path(file_path).read_bytes()
    except OSError as exc:
        raise SourceError(f"failed to read file: {exc}") from exc
    return data.decode("utf-8", errors="surrogateescape")


def _write(file_path: str | os.PathLike[str], content: str) -> None:
    try:
        Path(file_path).write_bytes(content.encode("utf-8", errors="surrogateescape"))
    except OSError as exc:
        raise SourceError(f"failed to write file: {exc}") from exc


def _exists(path: Path) -> bool:
    try:
        os.stat(path)
    except (OSError, ValueError):
        return False
    return True


class VersionSource(abc.ABC):
    """A kind of file that holds a project version."""

    name: ClassVar[str]
    default_file_name: ClassVar[str]

    def detect(self, project_path: str | os.PathLike[str]) -> bool:
        """Tell whether the project directory holds this kind of file."""
        return _exists(Path(project_path) / self.default_file_name)

    @abc.abstractmethod
    def get_version(self, file_path: str | os.PathLike[str]) -> str:
        """Read the version recorded in file_path."""

    @abc.abstractmethod
    def set_version(self, file_path: str | os.PathLike[str], new_version: str) -> None:
        """Write new_version into file_path."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


_PYPROJECT_FIND = (
    re.compile(r"""version\s*=\s*["']([^"']+)["']"""),
    re.compile(r"""version\s*=\s*\{[^}]*default\s*=\s*["']([^"']+)["']"""),
)

_PYPROJECT_REPLACE = (
    re.compile(r"""(version\s*=\s*["'])([^"']+)(["'])"""),
    re.compile(r"""(version\s*=\s*\{[^}]*default\s*=\s*["'])([^"']+)(["'][^}]*\})"""),
)


def _lookup(data: Any, *keys: str) -> Any:
    for key in keys:
        if not isinstance(data, dict):
            return None
        data = data.get(key)
    return data


class PyProjectSource(VersionSource):
    """The version in a pyproject.toml file."""

    name = "pyproject.toml"
    default_file_name = "pyproject.toml"

    def get_version(self, file_path: str | os.PathLike[str]) -> str:
        content = _read(file_path)

        for pattern in _PYPROJECT_FIND:
            match = pattern.search(content)
            if match:
                return match.group(1)

        try:
            data = tomllib.loads(content)
        except tomllib.TOMLDecodeError as exc:
            raise SourceError(f"failed to parse TOML: {exc}") from exc

        for keys in (("version",), ("project", "version"), ("tool", "poetry", "version")):
            version = _lookup(data, *keys)
            if isinstance(version, str):
                return version

        raise SourceError("version not found in pyproject.toml")

    def set_version(self, file_path: str | os.PathLike[str], new_version: str) -> None:
        content = _read(file_path)

        for pattern in _PYPROJECT_REPLACE:
            if pattern.search(content):
                content = pattern.sub(lambda m: m.group(1) + new_version + m.group(3), content)
                break
        else:
            raise SourceError("could not find version pattern to replace")

        _write(file_path, content)


_JSON_HTML_ESCAPES = {
    "&": "\\u0026",
    "<": "\\u003c",
    ">": "\\u003e",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _load_json_object(content: str) -> dict[str, Any]:
    try:
        data, _ = json.JSONDecoder().raw_decode(content.lstrip())
    except json.JSONDecodeError as exc:
        raise SourceError(f"failed to parse JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise SourceError("failed to parse JSON: top-level value is not an object")
    return data


class PackageJsonSource(VersionSource):
    """The version in a package.json file."""

    name = "package.json"
    default_file_name = "package.json"

    def get_version(self, file_path: str | os.PathLike[str]) -> str:
        data = _load_json_object(_read(file_path))
        version = data.get("version")
        if not isinstance(version, str):
            raise SourceError("version field not found or not a string")
        return version

    def set_version(self, file_path: str | os.PathLike[str], new_version: str) -> None:
        data = _load_json_object(_read(file_path))
        data["version"] = new_version

        output = json.dumps(data, indent=2, sort_keys=True, ensure_ascii=False)
        output = "".join(_JSON_HTML_ESCAPES.get(char, char) for char in output)
        _write(file_path, output + "\n")


_GALAXY_FIND = re.compile(r"""^version:\s*["']?([^"'\s]+)["']?\s*$""", re.MULTILINE)
_GALAXY_REPLACE = re.compile(r"""^(\s*version:\s*)["']?[^"'\s]+["']?(\s*)$""", re.MULTILINE)
_GALAXY_QUOTE = re.compile(r"""^version:\s*(["']?)""", re.MULTILINE)


class GalaxySource(VersionSource):
    """The version in an Ansible Galaxy galaxy.yml file."""

    name = "galaxy.yml"
    default_file_name = "galaxy.yml"

    def get_version(self, file_path: str | os.PathLike[str]) -> str:
        content = _read(file_path)

        match = _GALAXY_FIND.search(content)
        if match:
            return match.group(1)

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as exc:
            raise SourceError(f"failed to parse YAML: {exc}") from exc

        if not isinstance(data, dict) or "version" not in data:
            raise SourceError("version field not found in galaxy.yml")

        version = data["version"]
        if isinstance(version, str):
            return version
        if isinstance(version, float):
            return f"{version:.1f}"
        if isinstance(version, int) and not isinstance(version, bool):
            return f"{version}.0.0"
        raise SourceError(f"version field is not a string: {type(version).__name__}")

    def set_version(self, file_path: str | os.PathLike[str], new_version: str) -> None:
        content = _read(file_path)

        if not _GALAXY_REPLACE.search(content):
            raise SourceError("could not find version pattern to replace")

        quote_match = _GALAXY_QUOTE.search(content)
        quote = quote_match.group(1) if quote_match else ""

        content = _GALAXY_REPLACE.sub(
            lambda m: f"{m.group(1)}{quote}{new_version}{quote}{m.group(2)}", content
        )
        _write(file_path, content)


class VersionFileSource(VersionSource):
    """A plain file that holds only the version."""

    name = ".version"
    default_file_name = ".version"

    def get_version(self, file_path: str | os.PathLike[str]) -> str:
        version = _read(file_path).strip()
        version = re.split(r"[\r\n]", version, maxsplit=1)[0]
        if not version:
            raise SourceError("version file is empty")
        return version

    def set_version(self, file_path: str | os.PathLike[str], new_version: str) -> None:
        _write(file_path, new_version + "\n")