# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Jeff Culverhouse
from __future__ import annotations

import argparse
import os
from importlib.metadata import PackageNotFoundError, version as pkg_version
from typing import TYPE_CHECKING, Any, Mapping

import yaml

from check_ha_state.models import Credentials

if TYPE_CHECKING:
    from check_ha_state.interface import CheckServiceProtocol as CheckHaState

SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "set-cookie"})


class ConfigError(ValueError):
    """Raised when the arguments or the configuration file are invalid."""

    pass


class HomeAssistantError(Exception):
    """Raised when the Home Assistant API could not be reached or refused the request."""

    def __init__(self, message: str, *, status_code: int | None = None, url: str = "") -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(message)


class CheckFailed(Exception):
    """Raised by the first health check that fails."""

    pass


def read_version() -> str:
    env_version = os.getenv("APP_VERSION")
    if env_version and env_version.strip():
        return env_version.strip()
    try:
        return pkg_version("check-ha-state")
    except PackageNotFoundError:
        return "unknown"


def redact_headers(headers: Mapping[str, Any]) -> dict[str, Any]:
    return {key: "<redacted>" if key.lower() in SENSITIVE_HEADERS else value for key, value in headers.items()}


class HelpersMixin:
    def resolve_credentials(self: CheckHaState, args: argparse.Namespace) -> Credentials:
        url = getattr(args, "url", None) or ""
        token = getattr(args, "token", None) or ""
        config_arg = getattr(args, "config", None) or ""

        has_url, has_token, has_config = bool(url), bool(token), bool(config_arg)

        if not has_url and not has_token and not has_config:
            raise ConfigError("Missing required arguments --config or --url and --token!")
        if (has_url or has_token) and has_config:
            raise ConfigError("Remove --url and --token arguments if --config argument is used!")
        if (not has_url or not has_token) and not has_config:
            raise ConfigError("Both --url and --token arguments are required!")

        if has_config:
            config = self.load_config(config_arg)
            return Credentials(url=config["url"], token=config["token"])

        return Credentials(url=url, token=token)

    def load_config(self: CheckHaState, config_arg: str) -> dict[str, Any]:
        config_path = os.path.abspath(os.path.expanduser(config_arg))
        if os.path.isdir(config_path):
            config_file = os.path.join(config_path, "config.yaml")
        else:
            config_file = config_path

        self.logger.debug(f'reading config file "{config_file}"')

        try:
            with open(config_file, "r", encoding="utf-8") as f:
                raw = f.read()
        except OSError as err:
            raise ConfigError(f"cannot read config file {config_file}: {err.strerror or err}") from err

        try:
            config = yaml.safe_load(raw)
            if config is None:
                config = {}
        except yaml.YAMLError as err:
            raise ConfigError(f"{config_file} not a yaml file") from err

        if not isinstance(config, dict):
            raise ConfigError(f"{config_file} not a yaml file")

        # fmt: off
        config = {
            "url":   str(config.get("url") or ""),
            "token": str(config.get("token") or ""),
        }
        # fmt: on

        if not config["url"]:
            raise ConfigError('config file must contain "url" property')
        if not config["token"]:
            raise ConfigError('config file must contain "token" property')

        return config

    def validate_thresholds(self: CheckHaState, args: argparse.Namespace) -> None:
        for name in ("last_updated_age", "last_changed_age"):
            value = getattr(args, name, None) or 0
            if value < 0:
                raise ConfigError(f"--{name} must not be negative")

        timeout = getattr(args, "timeout", None)
        if timeout is not None and not timeout > 0:
            raise ConfigError("--timeout must be positive")
