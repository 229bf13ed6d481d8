from __future__ import annotations
import os
from pathlib import Path
from typing import Optional

# Defaults
_DEFAULT_HISTORY_FILE = Path.home() / '.cattywampus_history'
_DEFAULT_PROMPT = '> '
_DEFAULT_HOST = '127.0.0.1'
_DEFAULT_PORT = 8765

_TRUE = {'1', 'true', 'yes', 'on'}
_FALSE = {'0', 'false', 'no', 'off'}


def path_from_env(var: str, default: Optional[Path]) -> Optional[Path]:
    raw = os.environ.get(var)
    if raw is None:
        return default
    raw = raw.strip()
    # An explicitly empty variable disables the path
    return Path(raw).expanduser() if raw else None


def flag_from_env(var: str, default: bool) -> bool:
    raw = os.environ.get(var)
    if raw is None:
        return default
    raw = raw.strip().lower()
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    return default


def get_history_path() -> Optional[Path]:
    return path_from_env('CATTYWAMPUS_HISTORY', _DEFAULT_HISTORY_FILE)


def get_prompt() -> str:
    return os.environ.get('CATTYWAMPUS_PROMPT', _DEFAULT_PROMPT)


def echo_tokens() -> bool:
    return flag_from_env('CATTYWAMPUS_ECHO_TOKENS', False)


def color_enabled() -> bool:
    # NO_COLOR (https://no-color.org) wins over the default
    return flag_from_env('CATTYWAMPUS_COLOR', 'NO_COLOR' not in os.environ)


def get_server_address() -> tuple[str, int]:
    host = os.environ.get('CATTYWAMPUS_HOST', _DEFAULT_HOST)
    raw_port = os.environ.get('CATTYWAMPUS_PORT')
    try:
        port = int(raw_port) if raw_port else _DEFAULT_PORT
    except ValueError:
        port = _DEFAULT_PORT
    return host, port
