from __future__ import annotations

import json
import logging
from typing import Any

from .connection import KeyValueStore

logger = logging.getLogger(__name__)


def load_json(store: KeyValueStore, key: str, default: Any) -> Any:
    """Read and decode one key; missing or corrupt blobs yield ``default``."""

    raw = store.get(key)
    if raw is None:
        return default
    try:
        return json.loads(raw)
    except ValueError:
        logger.warning("Discarding unreadable JSON under key %r", key)
        return default


def dump_json(store: KeyValueStore, key: str, value: Any) -> None:
    store.set(key, json.dumps(value, ensure_ascii=False))


def load_list(store: KeyValueStore, key: str) -> list[dict]:
    value = load_json(store, key, [])
    return list(value) if isinstance(value, list) else []


def load_map(store: KeyValueStore, key: str) -> dict[str, Any]:
    value = load_json(store, key, {})
    return dict(value) if isinstance(value, dict) else {}
