"""Command line access to the MyShows RPC API."""

from __future__ import annotations

import argparse
import json
from typing import Any, Dict, Optional, Sequence

from myshows.api.client import MyShows
from myshows.api.methods import METHODS, api_version_for, methods_by_namespace, param_keys
from myshows.common.errors import ConfigError
from myshows.common.logging import get_logger, init_logging
from myshows.common.types import is_error

from ._utils import (
    exit_with_error,
    parse_key_value_pairs,
    print_json,
    require_subcommand,
)

log = get_logger(__name__)


def _handle_methods(args: argparse.Namespace) -> int:
    catalogue: Dict[str, Dict[str, Any]] = {}
    for namespace, names in methods_by_namespace(args.api).items():
        catalogue[namespace] = {
            name: {"api": api_version_for(name), "params": param_keys(name)} for name in names
        }
    print_json(catalogue)

    return 0


def _collect_params(args: argparse.Namespace) -> Dict[str, Any]:
    params: Dict[str, Any] = {}
    if args.params:
        try:
            loaded = json.loads(args.params)
        except ValueError as exc:
            exit_with_error(f"--params is not valid JSON: {exc}")
        if not isinstance(loaded, dict):
            exit_with_error("--params must be a JSON object")
        params.update(loaded)
    try:
        params.update(parse_key_value_pairs(args.param or []))
    except argparse.ArgumentTypeError as exc:
        exit_with_error(str(exc))

    return params


def _build_client() -> MyShows:
    try:
        return MyShows.from_settings()
    except ConfigError as exc:
        exit_with_error(
            f"{exc}. Set MYSHOWS_CLIENT_ID, MYSHOWS_CLIENT_SECRET, "
            "MYSHOWS_USERNAME and MYSHOWS_PASSWORD."
        )


def _handle_call(args: argparse.Namespace) -> int:
    if args.method not in METHODS:
        exit_with_error(f"Unknown method '{args.method}'. Run 'myshows methods' for the list.")

    params = _collect_params(args)
    with _build_client() as client:
        if args.login:
            failure = client.login_v3() if api_version_for(args.method) == "v3" else client.login()
            if failure is not None:
                print_json(failure)
                return 1

        response = client.generic(args.method, params)

    print_json(response)

    return 1 if is_error(response) else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="myshows", description="MyShows JSON-RPC client")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging verbosity (JSON lines on stderr)",
    )
    subparsers = parser.add_subparsers(dest="command")
    require_subcommand(subparsers)

    methods = subparsers.add_parser("methods", help="List the remote methods and their params")
    methods.add_argument("--api", choices=["v2", "v3"], default=None, help="Only one API version")
    methods.set_defaults(func=_handle_methods)

    call = subparsers.add_parser("call", help="Call one remote method")
    call.add_argument("method", help="Method name, e.g. shows.GetById")
    call.add_argument(
        "-p",
        "--param",
        action="append",
        metavar="KEY=VALUE",
        help="Method parameter; values are parsed as JSON when possible",
    )
    call.add_argument("--params", default=None, help="All parameters as one JSON object")
    call.add_argument(
        "--login",
        action="store_true",
        help="Log in with the configured credentials before calling",
    )
    call.set_defaults(func=_handle_call)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    init_logging(args.log_level)
    log.debug("cli_command %s", args.command)

    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
