# backend/utils/codec.py
"""Versioned JSON storage for nested record fields.

Every nested structure (product dimensions, order lines, role permissions,
plan grids...) is kept in a TEXT column as an envelope::

    {"v": <schema version>, "data": <payload>}

Rows written before the envelope existed hold the bare payload; they are read
as version 0. On read, the payload is passed through the registered upgraders
(``{from_version: callable}``) until it reaches the current version and is
then validated against the declared pydantic shape.
"""
import json
from typing import Any, Callable, Dict, Optional

from pydantic import TypeAdapter
from sqlalchemy.types import Text, TypeDecorator

ENVELOPE_KEYS = {"v", "data"}


def _unwrap(raw: Any):
    if isinstance(raw, dict) and set(raw) == ENVELOPE_KEYS:
        return raw["v"], raw["data"]
    return 0, raw


class VersionedJSON(TypeDecorator):
    impl = Text
    cache_ok = True

    def __init__(self, shape: Any, version: int = 1,
                 upgraders: Optional[Dict[int, Callable[[Any], Any]]] = None):
        super().__init__()
        self.shape = shape
        self.version = version
        self._upgraders = dict(upgraders or {})
        self._adapter = TypeAdapter(shape)

    def _normalize(self, value: Any) -> Any:
        # Round-trip through the shape so storage only ever sees plain JSON
        return self._adapter.dump_python(self._adapter.validate_python(value), mode="json")

    def encode(self, value: Any) -> Optional[str]:
        if value is None:
            return None
        payload = {"v": self.version, "data": self._normalize(value)}
        return json.dumps(payload, ensure_ascii=False)

    def decode(self, text: Optional[str]) -> Any:
        if text is None or text == "":
            return None
        version, data = _unwrap(json.loads(text))
        while version < self.version:
            upgrade = self._upgraders.get(version)
            if upgrade is not None:
                data = upgrade(data)
            version += 1
        return self._normalize(data)

    def process_bind_param(self, value, dialect):
        return self.encode(value)

    def process_result_value(self, value, dialect):
        return self.decode(value)
