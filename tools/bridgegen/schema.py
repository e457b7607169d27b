"""
Protocol description loader for bridgegen.

Parses a JSON (or YAML) protocol document into a ProtocolSpec dataclass.
Only the top-level structure is checked: the document must be a mapping
with a ``methods`` array.  Individual methods are normalized leniently so
that a sloppy entry degrades to an empty parameter list or a void return
instead of failing the whole run.
"""

import json
import os
from dataclasses import dataclass, field
from typing import List, Optional

import yaml


class BridgeGenError(Exception):
    """Base class for all bridgegen failures."""
    pass


class MalformedSpecError(BridgeGenError):
    """Raised when a protocol document is unreadable or lacks a methods array."""
    pass


class UnsupportedTargetError(BridgeGenError):
    """Raised when a requested target identifier is not supported."""

    def __init__(self, message: str, invalid: Optional[List[str]] = None):
        super().__init__(message)
        self.invalid = list(invalid or [])


class ConfigError(BridgeGenError):
    """Raised when bridgegen.yaml fails validation."""
    pass


@dataclass
class ParamSpec:
    name: str
    type: str
    desc: str = ""


@dataclass
class ReturnSpec:
    type: str = "void"
    desc: str = ""


@dataclass
class MethodSpec:
    name: str
    desc: str = ""
    min_version: Optional[str] = None
    params: List[ParamSpec] = field(default_factory=list)
    returns: ReturnSpec = field(default_factory=ReturnSpec)


@dataclass
class ProtocolSpec:
    """Parsed protocol description."""
    version: str
    methods: List[MethodSpec]
    source: str = "protocol.json"


def _text(value) -> str:
    """Render a scalar from the document as text; None becomes ''."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _pick_return(raw) -> ReturnSpec:
    if isinstance(raw, str) and raw:
        return ReturnSpec(type=raw)
    if isinstance(raw, dict):
        return ReturnSpec(type=raw.get("type") or "void",
                          desc=_text(raw.get("desc")))
    return ReturnSpec()


def _parse_param(raw) -> ParamSpec:
    if not isinstance(raw, dict):
        return ParamSpec(name=_text(raw), type="")
    return ParamSpec(name=_text(raw.get("name")),
                     type=raw.get("type"),
                     desc=_text(raw.get("desc")))


def _parse_method(raw) -> MethodSpec:
    if not isinstance(raw, dict):
        return MethodSpec(name=_text(raw))

    params = raw.get("params")
    if not isinstance(params, list):
        params = []

    min_version = raw.get("min_version")

    return MethodSpec(
        name=_text(raw.get("name")),
        desc=_text(raw.get("desc")),
        min_version=None if min_version is None else _text(min_version),
        params=[_parse_param(p) for p in params],
        returns=_pick_return(raw.get("returns")),
    )


def protocol_from_dict(data, source: str = "protocol.json") -> ProtocolSpec:
    """Check the top-level structure of a decoded document and normalize it.

    Raises:
        MalformedSpecError: If the root is not a mapping or ``methods`` is
            missing or not an array.
    """
    if not isinstance(data, dict):
        raise MalformedSpecError(f"{source}: document root must be an object")

    methods = data.get("methods")
    if not isinstance(methods, list):
        raise MalformedSpecError(f"{source}: missing 'methods' array")

    return ProtocolSpec(
        version=_text(data.get("version")),
        methods=[_parse_method(m) for m in methods],
        source=source,
    )


def parse_protocol(text: str, source: str = "protocol.json") -> ProtocolSpec:
    """Parse a JSON protocol document from a string."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedSpecError(f"{source}: invalid JSON: {e}") from e
    return protocol_from_dict(data, source)


def load_protocol(path) -> ProtocolSpec:
    """Read and parse the protocol file at ``path``.

    ``.yaml`` / ``.yml`` files are decoded with PyYAML, everything else as
    JSON.  Read errors propagate as OSError.
    """
    source = os.path.basename(str(path))

    with open(path, encoding="utf-8") as f:
        try:
            text = f.read()
        except UnicodeDecodeError as e:
            raise MalformedSpecError(f"{source}: invalid UTF-8: {e}") from e

    if source.endswith((".yaml", ".yml")):
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise MalformedSpecError(f"{source}: invalid YAML: {e}") from e
        return protocol_from_dict(data, source)

    return parse_protocol(text, source)
