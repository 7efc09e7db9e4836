"""The ooenv executable."""

from __future__ import annotations

import argparse
import logging
import shlex
import sys

import ooenv.config
from ooenv._environment import Environment

_logger = logging.getLogger(__name__)

_UNSET = "<unset>"


def main(argv: list[str] | None = None) -> int:
    """The main entry point for the ooenv executable."""
    parser = argparse.ArgumentParser(
        description="Locate the OpenOffice installation and SDK, "
        "and print the directories build tools need."
    )
    parser.add_argument(
        "--office",
        type=str,
        default=None,
        metavar="DIR",
        help="home directory of the office installation (overrides OFFICE_HOME)",
    )
    parser.add_argument(
        "--sdk",
        type=str,
        default=None,
        metavar="DIR",
        help="home directory of the office SDK (overrides OO_SDK_HOME)",
    )
    parser.add_argument(
        "-D",
        dest="properties",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="set a configuration property, used when the environment variable "
        "of the same name is not set; may be used multiple times",
    )
    parser.add_argument(
        "--export",
        action="store_true",
        default=False,
        help="print shell export statements instead of a table",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="log discovery details",
    )
    args = parser.parse_args(argv)

    ooenv.config.set_verbose(args.verbose)
    logging.basicConfig(level="DEBUG" if ooenv.config.get_verbose() else "INFO")

    for prop in args.properties:
        name, sep, value = prop.partition("=")
        if not sep or not name:
            parser.error(f"invalid property definition: {prop}")
        ooenv.config.set_property(name, value)

    env = Environment()
    try:
        if args.office is not None:
            env.set_office_home(args.office)
        if args.sdk is not None:
            env.set_oo_sdk_home(args.sdk)
    except ValueError as e:
        print(f"ooenv: error: {e}", file=sys.stderr)
        return 2

    values = _resolve_all(env)
    for name, value in values.items():
        if args.export:
            if value is not None:
                print(f"export {name}={shlex.quote(value)}")
        else:
            print(f"{name:<20} {_UNSET if value is None else value}")
    return 0 if all(v is not None for v in values.values()) else 1


def _resolve_all(env: Environment) -> dict[str, str | None]:
    getters = {
        "OFFICE_HOME": env.get_office_home,
        "OFFICE_BASE_HOME": env.get_office_base_home,
        "OO_SDK_HOME": env.get_oo_sdk_home,
        "OO_SDK_URE_HOME": env.get_oo_sdk_ure_home,
        "OO_SDK_URE_LIB_DIR": env.get_oo_sdk_ure_lib_dir,
        "OO_SDK_URE_BIN_DIR": env.get_oo_sdk_ure_bin_dir,
    }
    values = {}
    for name, getter in getters.items():
        try:
            values[name] = str(getter())
        except RuntimeError as e:
            _logger.debug("%s unresolved: %s", name, e)
            values[name] = None
    return values


def run() -> None:
    sys.exit(main())
