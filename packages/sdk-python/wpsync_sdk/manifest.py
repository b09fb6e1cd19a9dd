"""
composer.json reading and writing.

The manifest is handled as a plain dict so keys wpsync does not know about
survive unchanged.
"""

import json
from pathlib import Path
from typing import Any, Dict, Union

from wpsync_common import ManifestNotFoundError, ManifestParseError, get_logger

logger = get_logger(__name__)


def load_manifest(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Read and parse composer.json.

    Raises:
        ManifestNotFoundError: If the file does not exist
        ManifestParseError: If it is not a JSON object
    """
    path = Path(path)
    if not path.is_file():
        raise ManifestNotFoundError(
            f"{path} not found. Please run 'composer init' first."
        )

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ManifestParseError(f"Unable to parse existing {path}. Aborting. ({e})")

    if not isinstance(data, dict):
        raise ManifestParseError(f"Unable to parse existing {path}. Aborting. (not a JSON object)")

    logger.debug(f"Loaded manifest {path}")
    return data


def dump_manifest(data: Dict[str, Any]) -> str:
    """Pretty-print a manifest the way composer does: 4 spaces, slashes unescaped."""
    return json.dumps(data, indent=4, ensure_ascii=False) + "\n"


def write_manifest(path: Union[str, Path], data: Dict[str, Any]) -> None:
    """Write a manifest to disk."""
    path = Path(path)
    path.write_text(dump_manifest(data), encoding="utf-8")
    logger.debug(f"Wrote manifest {path}")
