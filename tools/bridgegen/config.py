"""
Optional project configuration for bridgegen.

A ``bridgegen.yaml`` file in the project root can set defaults for the
values otherwise given on the command line:

    bridge_name: JsBridge
    protocol: protocol.json
    out: generated
    lang: ts,js,java

Command-line flags always win over the file.
"""

import os
from dataclasses import dataclass
from typing import Optional

import yaml

from .emitter import DEFAULT_BRIDGE_NAME
from .schema import ConfigError

CONFIG_FILENAME = "bridgegen.yaml"
DEFAULT_PROTOCOL = "protocol.json"

_KNOWN_KEYS = ("bridge_name", "protocol", "out", "lang")


@dataclass
class BridgeConfig:
    """Project-level defaults."""
    bridge_name: str = DEFAULT_BRIDGE_NAME
    protocol: str = DEFAULT_PROTOCOL
    out: Optional[str] = None
    lang: Optional[str] = None


def _string(data: dict, key: str) -> Optional[str]:
    """Fetch an optional string value, raising ConfigError on other types."""
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"'{key}' in {CONFIG_FILENAME} must be a string")
    return value


def parse_config(yaml_str: str) -> BridgeConfig:
    """Parse the contents of a bridgegen.yaml file.

    Raises:
        ConfigError: If the YAML is invalid, the root is not a mapping, or a
            key is unknown or has the wrong type.
    """
    try:
        data = yaml.safe_load(yaml_str)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {CONFIG_FILENAME}: {e}") from e

    if data is None:
        return BridgeConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} root must be a mapping")

    unknown = sorted(str(k) for k in data if k not in _KNOWN_KEYS)
    if unknown:
        raise ConfigError(
            f"Unknown key(s) in {CONFIG_FILENAME}: {', '.join(unknown)}")

    # lang may be written as a YAML list instead of a comma string.
    lang = data.get("lang")
    if isinstance(lang, list):
        if not all(isinstance(item, str) for item in lang):
            raise ConfigError(f"'lang' in {CONFIG_FILENAME} must list strings")
        lang = ",".join(lang)
    elif lang is not None:
        lang = _string(data, "lang")

    config = BridgeConfig(out=_string(data, "out"), lang=lang)

    bridge_name = _string(data, "bridge_name")
    if bridge_name:
        config.bridge_name = bridge_name
    protocol = _string(data, "protocol")
    if protocol:
        config.protocol = protocol

    return config


def load_config(root) -> BridgeConfig:
    """Load ``bridgegen.yaml`` from ``root``; defaults when it is absent."""
    path = os.path.join(str(root), CONFIG_FILENAME)
    if not os.path.exists(path):
        return BridgeConfig()

    with open(path, encoding="utf-8") as f:
        try:
            text = f.read()
        except UnicodeDecodeError as e:
            raise ConfigError(f"{CONFIG_FILENAME}: invalid UTF-8: {e}") from e

    return parse_config(text)
