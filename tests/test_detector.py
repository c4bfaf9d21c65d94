import pytest

from bumpr.detector import Detector
from bumpr.sources import SourceError


def test_available_sources_in_order():
    assert Detector().available_sources() == ["pyproject.toml", "package.json", "galaxy.yml", ".version"]


def test_detect_source_prefers_pyproject(tmp_path):
    (tmp_path / "package.json").write_text('{"version": "1.0.0"}', encoding="utf-8")
    (tmp_path / "pyproject.toml").write_text('version = "2.0.0"\n', encoding="utf-8")
    source, path = Detector().detect_source(tmp_path)
    assert source.name == "pyproject.toml"
    assert path == tmp_path / "pyproject.toml"
    assert source.get_version(path) == "2.0.0"


def test_detect_source_version_file(tmp_path):
    (tmp_path / ".version").write_text("0.9.0\n", encoding="utf-8")
    source, path = Detector().detect_source(tmp_path)
    assert source.name == ".version"
    assert path == tmp_path / ".version"


def test_detect_source_empty_directory(tmp_path):
    with pytest.raises(SourceError, match="no version source file found"):
        Detector().detect_source(tmp_path)


def test_source_for_file_missing(tmp_path):
    with pytest.raises(SourceError, match="file does not exist"):
        Detector().source_for_file(tmp_path / "package.json")


@pytest.mark.parametrize(
    "file_name, expected",
    [
        ("pyproject.toml", "pyproject.toml"),
        ("package.json", "package.json"),
        ("galaxy.yml", "galaxy.yml"),
        ("galaxy.yaml", "galaxy.yml"),
        (".version", ".version"),
        ("VERSION", ".version"),
        ("other.json", ".version"),
    ],
)
def test_source_for_file_by_name(tmp_path, file_name, expected):
    path = tmp_path / file_name
    path.write_text("1.0.0\n", encoding="utf-8")
    assert Detector().source_for_file(path).name == expected


def test_source_for_file_round_trip(tmp_path):
    path = tmp_path / "VERSION"
    path.write_text("1.0.0\n", encoding="utf-8")
    source = Detector().source_for_file(path)
    source.set_version(path, "1.0.1")
    assert source.get_version(path) == "1.0.1"