# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Jeff Culverhouse
import argparse
import logging
from datetime import datetime
from typing import Any, Protocol

import requests

from check_ha_state.models import Credentials, EntityState


class CheckServiceProtocol(Protocol):
    """Attributes and methods the mixins expect to find on the composed check."""

    args: argparse.Namespace
    logger: logging.Logger
    credentials: Credentials
    session: requests.Session
    timeout: float

    # helpers
    def resolve_credentials(self, args: argparse.Namespace) -> Credentials: ...
    def load_config(self, config_arg: str) -> dict[str, Any]: ...
    def validate_thresholds(self, args: argparse.Namespace) -> None: ...

    # ha_api
    def state_url(self, entity_id: str) -> str: ...
    def get_headers(self) -> dict[str, str]: ...
    def request_state(self, entity_id: str) -> str: ...
    def get_state(self, body: str) -> EntityState: ...

    # checks
    def check_state(self, state: EntityState) -> None: ...
    def check_age(self, timestamp: str, max_age: int | None, now: datetime | None = None) -> tuple[int, bool]: ...
    def evaluate(self, state: EntityState, last_updated_age: int | None, last_changed_age: int | None) -> str: ...
