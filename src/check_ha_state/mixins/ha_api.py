# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Jeff Culverhouse
from __future__ import annotations

import json

from requests.exceptions import RequestException

from typing import TYPE_CHECKING

from check_ha_state.mixins.helpers import HomeAssistantError, redact_headers
from check_ha_state.models import EntityState

if TYPE_CHECKING:
    from check_ha_state.interface import CheckServiceProtocol as CheckHaState

STATES_PATH = "api/states/"


class HomeAssistantAPIMixin:
    def state_url(self: CheckHaState, entity_id: str) -> str:
        url = self.credentials.url
        if not url.endswith("/"):
            url += "/"
        return url + STATES_PATH + entity_id

    def get_headers(self: CheckHaState) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.credentials.token}",
            "Content-Type": "application/json",
        }

    def request_state(self: CheckHaState, entity_id: str) -> str:
        url = self.state_url(entity_id)
        headers = self.get_headers()
        self.logger.debug(f"requesting {url}")
        self.logger.debug(f"request headers: {redact_headers(headers)}")

        try:
            r = self.session.get(url, headers=headers, timeout=self.timeout)
        except RequestException as err:
            raise HomeAssistantError(f"request error communicating with Home Assistant: {err}", url=url) from err

        status = f"{r.status_code} {r.reason}".strip()
        self.logger.debug(f"response status: {status}")
        self.logger.debug("response headers:")
        for key, value in redact_headers(r.headers).items():
            self.logger.debug(f"  {key}: {value}")

        if r.status_code != 200:
            raise HomeAssistantError(f"State not found: {status}", status_code=r.status_code, url=url)

        body = r.text
        self.logger.debug(f"response: {body}")
        return body

    def get_state(self: CheckHaState, body: str) -> EntityState:
        try:
            data = json.loads(body)
        except (ValueError, RecursionError):
            self.logger.warning("response body is not valid JSON, continuing with an empty state")
            return EntityState()

        return EntityState.from_dict(data)
