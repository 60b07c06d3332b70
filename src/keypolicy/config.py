"""Policy configuration loader.

Values come from an optional YAML file (``KEYPOLICY_CONFIG``, default
``config/keypolicy.yml``), then environment overrides. Nothing is cached:
every call re-reads both so an edited policy applies on the next call.
"""
from __future__ import annotations

import os
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel

from .utils.logging import get_logger

load_dotenv()

log = get_logger()

_DEF_PATH = os.path.join("config", "keypolicy.yml")

_ENV_MAP = {
    "keytype_allow": "KEYPOLICY_KEYTYPE_ALLOW",
    "keytype_default": "KEYPOLICY_KEYTYPE_DEFAULT",
}


class PolicyConfig(BaseModel):
    keytype_allow: Optional[str] = None
    keytype_default: Optional[str] = None


def config_path() -> str:
    return os.getenv("KEYPOLICY_CONFIG", _DEF_PATH)


def _read_yaml(path: str) -> Dict[str, Any]:
    if not os.path.exists(path):
        return {}
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        log.warning("ignoring %s: expected a mapping", path)
        return {}
    return data


def load_policy_config(path: str | None = None) -> PolicyConfig:
    values: Dict[str, Any] = {}
    data = _read_yaml(path or config_path())
    for key in _ENV_MAP:
        if data.get(key) is not None:
            values[key] = str(data[key])
    for key, env in _ENV_MAP.items():
        if env in os.environ:
            values[key] = os.environ[env]
    return PolicyConfig(**values)


__all__ = ["PolicyConfig", "config_path", "load_policy_config"]
