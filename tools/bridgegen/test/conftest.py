"""Shared fixtures for bridgegen tests."""

import json

import pytest
import sys
import os

# Add the project root to sys.path so 'tools.bridgegen' is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "..", ".."))

from tools.bridgegen.schema import parse_protocol


USER_JSON = """\
{"version":"1.0.0","methods":[{"name":"getUser","params":[{"name":"id","type":"uint"}],"returns":{"type":"string","desc":"user json"}}]}
"""


BRIDGE_JSON = """\
{
  "version": "2.3.1",
  "methods": [
    {
      "name": "openUrl",
      "desc": "Open a URL in the system browser.",
      "min_version": "1.2.0",
      "params": [
        {"name": "url", "type": "string"},
        {"name": "inApp", "type": "boolean"}
      ],
      "returns": {"type": "boolean", "desc": "true when the URL was handled"}
    },
    {
      "name": "setVolume",
      "params": [
        {"name": "level", "type": "double"},
        {"name": "channel", "type": "int"}
      ]
    },
    {
      "name": "getBattery",
      "desc": "Battery level.\\nReported as a percentage.",
      "min_version": 2,
      "returns": "uint"
    },
    {
      "name": "ping"
    },
    {
      "name": "sendBlob",
      "params": [
        {"name": "blob", "type": "bytes"},
        {"name": "count", "type": " uint, "}
      ],
      "returns": {"type": "map"}
    }
  ]
}
"""


@pytest.fixture
def user_spec():
    """Single-method protocol from the getUser example."""
    return parse_protocol(USER_JSON)


@pytest.fixture
def bridge_spec():
    """Protocol exercising docs, tags, unknown types and missing fields."""
    return parse_protocol(BRIDGE_JSON)


@pytest.fixture
def project(tmp_path):
    """Project root containing protocol.json."""
    (tmp_path / "protocol.json").write_text(BRIDGE_JSON)
    return tmp_path


@pytest.fixture
def bridge_dict():
    """Decoded BRIDGE_JSON document."""
    return json.loads(BRIDGE_JSON)
