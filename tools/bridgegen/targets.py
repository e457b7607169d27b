"""
Target selection and output path resolution.
"""

from pathlib import Path
from typing import List, Optional

from .schema import BridgeGenError, UnsupportedTargetError

SUPPORTED_TARGETS = ("ts", "js", "java", "objc", "cpp")

# Target id → file suffix appended to the bridge name.
OUTPUT_FILES = {
    "ts":   ".d.ts",
    "js":   ".js",
    "java": ".java",
    "objc": ".h",
    "cpp":  ".hpp",
}

DEFAULT_OUT_DIR = "generated"


def parse_targets(lang: Optional[str] = None, all_targets: bool = False) -> List[str]:
    """Turn the raw ``--lang`` value into a list of target ids.

    No ``--lang`` and ``--all`` both select every supported target.

    Raises:
        UnsupportedTargetError: If any requested id is unknown.
    """
    if all_targets or lang is None:
        return list(SUPPORTED_TARGETS)

    requested = []
    for item in lang.split(","):
        item = item.strip()
        if item and item not in requested:
            requested.append(item)

    invalid = [t for t in requested if t not in SUPPORTED_TARGETS]
    if invalid:
        raise UnsupportedTargetError(
            f"Unsupported lang(s): {', '.join(invalid)}. "
            f"Supported: {','.join(SUPPORTED_TARGETS)}",
            invalid,
        )
    return requested


def resolve_out_dir(out: Optional[str], root) -> Path:
    """Resolve the ``--out`` value against the project root.

    A leading ``~`` expands to the current user's home directory, relative
    paths are taken from ``root`` and absolute paths are kept as given.
    """
    root = Path(root)
    if out is None or not out.strip():
        return root / DEFAULT_OUT_DIR

    out = out.strip()
    if out.startswith("~"):
        try:
            home = Path.home()
        except RuntimeError as e:
            raise BridgeGenError(f"Cannot expand {out!r}: {e}") from e
        path = home / out[1:].lstrip("/\\")
    else:
        path = Path(out)

    if path.is_absolute():
        return path
    return root / path


def output_filename(target: str, bridge_name: str) -> str:
    """File name written for ``target``, e.g. ``JsBridge.d.ts``."""
    return f"{bridge_name}{OUTPUT_FILES[target]}"
