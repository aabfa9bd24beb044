# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Jeff Culverhouse
from __future__ import annotations

import dataclasses
import enum
from typing import Any


class NagiosStatus(enum.IntEnum):
    OK = 0
    CRITICAL = 2


@dataclasses.dataclass(frozen=True)
class Credentials:
    """Home Assistant base url and long-lived access token."""

    url: str
    token: str

    def __repr__(self) -> str:
        return f"Credentials(url={self.url!r}, token='<redacted>')"


@dataclasses.dataclass(frozen=True)
class EntityState:
    """One entity as returned by ``GET /api/states/<entity_id>``.

    Every field is kept as the raw string the server sent. Fields the
    response did not carry are empty strings.
    """

    entity_id: str = ""
    state: str = ""
    last_changed: str = ""
    last_updated: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> EntityState:
        if not isinstance(data, dict):
            return cls()
        return cls(**{field.name: _as_str(data.get(field.name)) for field in dataclasses.fields(cls)})


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""
