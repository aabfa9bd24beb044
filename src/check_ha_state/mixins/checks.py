# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Jeff Culverhouse
from __future__ import annotations

import re
from datetime import datetime, timezone

from typing import TYPE_CHECKING

from check_ha_state.mixins.helpers import CheckFailed
from check_ha_state.models import EntityState

if TYPE_CHECKING:
    from check_ha_state.interface import CheckServiceProtocol as CheckHaState

# what an unparseable timestamp turns into, so its age is huge rather than an error
ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)

BAD_STATES = ("unknown", "unavailable")

RFC3339_RE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:\d{2})?$")
FRACTION_RE = re.compile(r"(\.\d{6})\d+")


def parse_timestamp(value: str) -> datetime | None:
    """Parse an RFC 3339 date-time such as `2025-06-01T12:00:00.123456+00:00`.

    Date-only values and the compact ISO-8601 forms `fromisoformat` would also
    take are refused. A missing offset is read as UTC.
    """
    if not isinstance(value, str) or not RFC3339_RE.match(value.strip()):
        return None
    # datetime only keeps microseconds
    value = FRACTION_RE.sub(r"\1", value.strip())
    try:
        ts = datetime.fromisoformat(value)
    except ValueError:
        return None
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts


class ChecksMixin:
    def check_state(self: CheckHaState, state: EntityState) -> None:
        value = state.state.lower()
        if value in BAD_STATES:
            raise CheckFailed(f"{state.entity_id} value {value.upper()}")

    def check_age(self: CheckHaState, timestamp: str, max_age: int | None, now: datetime | None = None) -> tuple[int, bool]:
        """Return how many whole seconds ago `timestamp` was, and whether that exceeds `max_age`.

        A `max_age` of 0 or None skips the check and returns (0, False).
        """
        if not max_age:
            return 0, False

        ts = parse_timestamp(timestamp)
        if ts is None:
            self.logger.warning(f"cannot parse timestamp {timestamp!r}, treating it as {ZERO_TIME.isoformat()}")
            ts = ZERO_TIME

        now = now or datetime.now(timezone.utc)
        ago = int(now.timestamp()) - int(ts.timestamp())
        self.logger.debug(f"timestamp {timestamp!r} is {ago}s old (max {max_age}s)")

        return ago, ago > max_age

    def evaluate(self: CheckHaState, state: EntityState, last_updated_age: int | None, last_changed_age: int | None) -> str:
        self.check_state(state)

        ago, problem = self.check_age(state.last_updated, last_updated_age)
        if problem:
            raise CheckFailed(f"{state.entity_id} last update too long ago ({ago}s > {last_updated_age}s)")

        ago, problem = self.check_age(state.last_changed, last_changed_age)
        if problem:
            raise CheckFailed(f"{state.entity_id} last change too long ago ({ago}s > {last_changed_age}s)")

        return f"{state.entity_id} | state={state.state} last_updated={state.last_updated} last_changed={state.last_changed}"
