"""Shared helpers for the MyShows CLI."""

from __future__ import annotations

import argparse
import json
import sys
from enum import Enum
from typing import Any, Iterable, Mapping, MutableMapping, NoReturn


def require_subcommand(subparsers: argparse._SubParsersAction) -> None:
    """Force argparse to require that a sub-command is provided."""

    subparsers.required = True


def print_json(payload: Any) -> None:
    """Render a Python object as formatted JSON to stdout."""

    print(json.dumps(to_serializable(payload), indent=2, sort_keys=True, ensure_ascii=False))


def to_serializable(value: Any) -> Any:
    """Convert results (dicts, enums, pydantic models) into JSON-friendly structures."""

    if value is None or isinstance(value, (bool, int, float)) and not isinstance(value, Enum):
        return value
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        return {str(k): to_serializable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [to_serializable(item) for item in value]
    if hasattr(value, "model_dump"):
        return to_serializable(value.model_dump())
    return str(value)


def coerce_value(raw: str) -> Any:
    """Interpret a CLI value as JSON when possible (numbers, booleans, lists), else a string."""

    try:
        return json.loads(raw)
    except ValueError:
        return raw


def parse_key_value_pairs(pairs: Iterable[str]) -> MutableMapping[str, Any]:
    """Parse ``key=value`` strings into a mapping with JSON-coerced values."""

    data: MutableMapping[str, Any] = {}
    for pair in pairs:
        if "=" not in pair:
            raise argparse.ArgumentTypeError(f"Expected KEY=VALUE syntax, got '{pair}'")
        key, value = pair.split("=", 1)
        data[key.strip()] = coerce_value(value.strip())
    return data


def exit_with_error(message: str, *, code: int = 1) -> NoReturn:
    """Emit a message to stderr and exit."""

    sys.stderr.write(f"Error: {message}\n")
    raise SystemExit(code)
