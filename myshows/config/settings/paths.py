"""Location of the settings file and ``${VAR}`` expansion for its values.

The bundled ``myshowsservicesettings.json`` is used unless
``MYSHOWS_SETTINGS_PATH`` or an optional ``config_paths.json`` next to it
points elsewhere. A ``.env`` at the package root is loaded first so its
variables are visible to the expansion.
"""

from __future__ import annotations

import json
import os
import re
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

_CONFIG_DIR = Path(__file__).resolve().parent.parent
_PACKAGE_ROOT = _CONFIG_DIR.parent

load_dotenv(_PACKAGE_ROOT / ".env")

SETTINGS_PATH_ENV = "MYSHOWS_SETTINGS_PATH"

_BUNDLED_SETTINGS = _CONFIG_DIR / "myshowsservicesettings.json"
_CONFIG_PATHS_FILE = _CONFIG_DIR / "config_paths.json"

_ENV_TOKEN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")


def expand_env_in_str(value: str) -> str:
    """Replace ``${VAR}`` tokens with the environment value ("" when unset)."""

    return _ENV_TOKEN.sub(lambda m: os.getenv(m.group(1), ""), value)


def expand_env(obj: Any) -> Any:
    if isinstance(obj, str):
        return expand_env_in_str(obj)
    if isinstance(obj, (list, tuple)):
        return [expand_env(item) for item in obj]
    if isinstance(obj, dict):
        return {key: expand_env(item) for key, item in obj.items()}

    return obj


def read_json(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as fh:
        return json.load(fh)


def _absolute(value: str, *, relative_to: Path) -> str:
    candidate = Path(os.path.expanduser(value))
    if not candidate.is_absolute():
        candidate = relative_to / candidate

    return str(candidate.resolve())


def _configured_settings_path() -> Optional[str]:
    if not _CONFIG_PATHS_FILE.exists():
        return None

    entry = (read_json(_CONFIG_PATHS_FILE) or {}).get("service_settings")

    return _absolute(entry, relative_to=_PACKAGE_ROOT) if entry else None


def load_config_paths() -> Dict[str, str]:
    """Resolve every configured path; the environment wins over ``config_paths.json``."""

    override = os.getenv(SETTINGS_PATH_ENV)
    if override:
        settings_path = _absolute(override, relative_to=Path.cwd())
    else:
        settings_path = _configured_settings_path() or str(_BUNDLED_SETTINGS)

    return {"service_settings": settings_path}


PATHS: Dict[str, str] = load_config_paths()


def get_service_settings_path() -> Path:
    return Path(PATHS["service_settings"])


__all__ = [
    "PATHS",
    "SETTINGS_PATH_ENV",
    "expand_env",
    "expand_env_in_str",
    "get_service_settings_path",
    "load_config_paths",
    "read_json",
]
