"""On-disk configuration inputs: project root, JSON documents and .env files."""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from dotenv import dotenv_values

ROOT_ENV_VAR = "CODEGOV_ROOT"
ENV_FILE_NAME = ".env"

# Repository checkout, and the copy of its assets shipped inside the wheel
SOURCE_ROOT = Path(__file__).resolve().parents[2]
PACKAGED_ROOT = Path(__file__).resolve().parents[1] / "_root"
MARKER_FILE = "swagger.json"


def get_project_root(environ: Mapping[str, str] | None = None) -> Path:
    """Get the directory holding the metadata and API documentation files.

    The root can be overridden with the CODEGOV_ROOT env var.
    Defaults to the repository checkout containing the codegov package,
    then to the assets installed with the package.
    """
    override = (environ or {}).get(ROOT_ENV_VAR)
    if override:
        path = Path(override)
        if not path.is_dir():
            raise FileNotFoundError(f"Project root not found: {override}")
        return path

    if (SOURCE_ROOT / MARKER_FILE).exists():
        return SOURCE_ROOT
    return PACKAGED_ROOT


def load_json_document(file_path: Path) -> Any:
    """Load a JSON document and return it unchanged.

    Args:
        file_path: Path to the JSON file

    Returns:
        The decoded document

    Raises:
        FileNotFoundError: If the file doesn't exist
        json.JSONDecodeError: If the JSON syntax is invalid
    """
    if not file_path.exists():
        raise FileNotFoundError(f"Configuration document not found: {file_path}")

    with file_path.open("r", encoding="utf-8") as f:
        return json.load(f)


def load_env_file(file_path: Path) -> dict[str, str]:
    """Read KEY=VALUE pairs from a dotenv file.

    A missing file yields no values. Keys declared without a value
    (a bare ``KEY`` line) are dropped. ``${VAR}`` references are kept
    literally, never expanded.
    """
    if not file_path.exists():
        return {}

    return {
        key: value
        for key, value in dotenv_values(file_path, interpolate=False).items()
        if value is not None
    }


def build_env_store(
    environ: Mapping[str, str],
    env_file: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Build the variable store one resolution reads from.

    The store is seeded from ``environ``; ``env_file`` values fill in keys
    that are not already set. Variables already present in the environment
    win, matching python-dotenv's non-override loading.

    Args:
        environ: Process environment snapshot
        env_file: Values read from a .env file

    Returns:
        A new dict; neither input is modified
    """
    store = dict(env_file or {})
    store.update(environ)
    return store
