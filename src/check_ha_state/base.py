# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Jeff Culverhouse
from __future__ import annotations

import argparse
import logging
from types import TracebackType
from typing import Any, Self, cast

import requests

from check_ha_state.interface import CheckServiceProtocol as CheckHaState

DEFAULT_TIMEOUT = 15.0


class Base:
    def __init__(self: CheckHaState, args: argparse.Namespace, **kwargs: Any) -> None:
        super().__init__(**kwargs)

        self.args = args
        self.logger = logging.getLogger(__name__)

        # we don't want to get this mess of deeper-level logging
        logging.getLogger("urllib3.connectionpool").setLevel(logging.WARNING)

        # fails before any request is made
        self.validate_thresholds(args)
        self.credentials = self.resolve_credentials(args)

        timeout = getattr(args, "timeout", None)
        self.timeout = DEFAULT_TIMEOUT if timeout is None else timeout
        self.session: requests.Session

    def __enter__(self: Self) -> CheckHaState:
        self.session = requests.Session()
        return cast(CheckHaState, self)

    def __exit__(self: Self, exc_type: type[BaseException] | None, exc_val: BaseException | None, exc_tb: TracebackType | None) -> None:
        session = getattr(self, "session", None)
        if session is not None:
            session.close()

    def run(self: Self) -> str:
        check = cast(CheckHaState, self)
        args = check.args

        body = check.request_state(args.entity)
        state = check.get_state(body)

        return check.evaluate(state, args.last_updated_age, args.last_changed_age)
