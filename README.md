# bumpr

A library to read, bump and write semantic versions kept in project files.

bumpr knows four kinds of version file. When it looks through a project
directory, it checks for them in this order:

1. `pyproject.toml`: a `version = "..."` entry, including the
   `version = { ..., default = "..." }` form
2. `package.json`: the top-level `"version"` field
3. `galaxy.yml`: a `version:` line, quoted or not
4. `.version`: a plain file whose first line is the version

## Versions

A version has the form `MAJOR.MINOR.PATCH`, with an optional leading `v`.
The prefix is kept when a version is bumped.

```python
from bumpr.version import BumpType, bump, parse, parse_bump_type, validate

bump("1.2.3", BumpType.PATCH)   # "1.2.4"
bump("v1.2.3", BumpType.MINOR)  # "v1.3.0"
bump("1.2.3", "major")          # "2.0.0"

parse_bump_type("MAJOR")        # BumpType.MAJOR (case is ignored)

version = parse("v1.2.3")
version.prefix, version.major, version.minor, version.patch  # ("v", 1, 2, 3)
str(version)                    # "v1.2.3"
version.without_prefix()        # "1.2.3"

validate("1.2")                 # raises VersionError
```

Anything other than exactly three dot-separated numbers, such as `1.2`,
`1.2.3.4` or `1.2.x`, raises `VersionError`. An unknown bump type raises
`VersionError` too.

Also in `bumpr.version`:

- `Version.bump_major()`, `bump_minor()` and `bump_patch()` change a
  version in place; `bump_version(version, bump_type)` returns a bumped
  copy and leaves the original alone.
- `Version.compare(other)` returns a negative number, zero or a positive
  number.
- `is_valid_bump_type(name)` tells whether a name is `major`, `minor` or
  `patch`, ignoring case.
- `normalize_version(text)` parses a version and renders it again.

## Version files

Each kind of file has a class in `bumpr.sources` with `detect(project_path)`,
`get_version(file_path)` and `set_version(file_path, new_version)`:
`PyProjectSource`, `PackageJsonSource`, `GalaxySource` and
`VersionFileSource`.

```python
from bumpr.sources import GalaxySource

galaxy = GalaxySource()
galaxy.get_version("galaxy.yml")           # e.g. "1.2.3"
galaxy.set_version("galaxy.yml", "2.0.0")  # version: "1.2.3" becomes version: "2.0.0"
```

How each file is written back:

- `pyproject.toml` is edited in place by pattern: every `version = "..."`
  string is replaced (or, if there is none, every
  `version = { ... default = "..." }` form), keeping the quotes and
  spacing. Note that keys ending in `version`, such as `target-version`,
  match the pattern as well.
- `package.json` is written out again with two-space indentation, keys
  sorted, and a trailing newline.
- `galaxy.yml` has its `version:` lines replaced in place, keeping the
  quoting style and spacing.
- `.version` is overwritten with the new version and a newline.

Reading `galaxy.yml` falls back to YAML parsing when no plain `version:`
line is found; a numeric version there is rendered as `1.5` for a float
or `3.0.0` for an integer.

A file that cannot be read, parsed or updated raises `SourceError`.

## Finding the version file

`bumpr.detector.Detector` picks the source for a project directory or for
a file you name:

```python
from bumpr.detector import Detector
from bumpr.version import BumpType, bump

detector = Detector()
source, path = detector.detect_source(".")
current = source.get_version(path)
source.set_version(path, bump(current, BumpType.MINOR))

detector.available_sources()
# ["pyproject.toml", "package.json", "galaxy.yml", ".version"]
```

`detect_source` raises `SourceError` when none of the files is present.
`source_for_file(path)` takes the path of an existing file (raising
`SourceError` if it does not exist) and chooses the source by file name;
`galaxy.yaml` is treated like `galaxy.yml`, and any other unrecognised
file is handled as a plain `.version`-style file.

## What bumpr does not do

bumpr is a library only. It installs no command, and it does not run git
or any other program: it does not commit, tag or push, and it does not
create releases. It only reads and writes the version recorded in the
project's files.

## Tests

```
pip install -e ".[test]"
pytest
```