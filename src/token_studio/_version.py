"""Version lookup for token-studio.

A source checkout reports the ``[project]`` version from its pyproject.toml;
an installed distribution reports its metadata version.
"""

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path

DISTRIBUTION = "token-studio"

_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def _checkout_version(pyproject: Path) -> str | None:
    try:
        with pyproject.open("rb") as f:
            project = tomllib.load(f).get("project", {})
    except (OSError, tomllib.TOMLDecodeError):
        return None
    # Ignore a pyproject.toml that belongs to some other project
    if project.get("name") != DISTRIBUTION:
        return None
    found = project.get("version")
    return found if isinstance(found, str) else None


def get_version() -> str:
    checkout = _checkout_version(_PYPROJECT)
    if checkout is not None:
        return checkout
    try:
        return _metadata_version(DISTRIBUTION)
    except PackageNotFoundError:
        return "0.0.0"
