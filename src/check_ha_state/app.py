# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Jeff Culverhouse
#!/usr/bin/env python3
import argparse
import logging
import sys
from typing import NoReturn, Sequence

from .base import DEFAULT_TIMEOUT
from .core import CheckHaState
from .mixins.helpers import CheckFailed, ConfigError, HomeAssistantError, read_version
from .models import NagiosStatus


class CheckArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports bad arguments through the CRITICAL path instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise ConfigError(message)


def build_parser() -> argparse.ArgumentParser:
    p = CheckArgumentParser(
        prog="check_ha_state",
        description="Nagios check for the state and freshness of a Home Assistant entity",
    )
    p.add_argument(
        "--config",
        help='YAML configuration file (or directory holding config.yaml) containing "url" and "token" properties',
    )
    p.add_argument("--url", help="HomeAssistant url. Example: http://127.0.0.1:8123")
    p.add_argument("--token", help="HomeAssistant API token")
    p.add_argument("-e", "--entity", required=True, help="HomeAssistant entity id")
    p.add_argument("-u", "--last_updated_age", type=int, default=0, metavar="SECONDS", help="Maximum last updated age in seconds")
    p.add_argument("-c", "--last_changed_age", type=int, default=0, metavar="SECONDS", help="Maximum last changed age in seconds")
    p.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        metavar="SECONDS",
        help=f"HTTP request timeout in seconds (default {DEFAULT_TIMEOUT:g})",
    )
    p.add_argument("--debug", action="store_true", help="Show debug info")
    p.add_argument("--version", action="version", version=f"%(prog)s {read_version()}")
    return p


def setup_logging(debug: bool = False) -> None:
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        level=level,
        stream=sys.stderr,
    )
    logging.getLogger("check_ha_state").setLevel(level)


def nagios_ok(message: str) -> int:
    print(f"OK - {message}")
    return NagiosStatus.OK


def nagios_critical(message: str) -> int:
    print(f"CRITICAL - {message}")
    return NagiosStatus.CRITICAL


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except ConfigError as err:
        return nagios_critical(str(err))

    setup_logging(args.debug)
    logger = logging.getLogger(__name__)

    try:
        with CheckHaState(args) as check:
            message = check.run()
    except (ConfigError, HomeAssistantError, CheckFailed) as err:
        logger.debug(f"check failed: {err!r}")
        return nagios_critical(str(err))
    except Exception as err:
        logger.error(f"Unhandled exception: {err}", exc_info=True)
        return nagios_critical(f"unhandled error: {err}")

    return nagios_ok(message)
