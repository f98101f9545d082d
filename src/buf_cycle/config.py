"""Configuration loading with a minimal YAML reader.

Config files live in the configs/ directory and are flat:

    timeout: 2.5
    forward_keys:
      - f6
      - C-n
    backward_keys: [S-f6, C-p]
    hidden_marker: " "

Only top-level scalars, ``- item`` lists, ``[a, b]`` lists, comments and
quoted strings are understood. Nested mappings are not needed here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from buf_cycle.keys import DEFAULT_BACKWARD_KEYS, DEFAULT_FORWARD_KEYS

# --- Minimal YAML Parser ---


def parse_simple_yaml(text: str, raw_keys: tuple[str, ...] = ()) -> dict:
    """Parse a flat YAML document into a dict of scalars and lists.

    Values under ``raw_keys`` are kept as text (quotes removed), so a key
    spec like ``no`` or ``1`` is not turned into a bool or a number.
    """
    result: dict = {}
    current_list: list | None = None
    parse = _parse_value

    for raw in text.split("\n"):
        stripped = raw.strip()
        if not stripped or stripped.startswith("#"):
            continue

        # List item belonging to the last key with no inline value
        if stripped.startswith("- ") or stripped == "-":
            if current_list is not None:
                item = _remove_inline_comment(stripped[1:].strip())
                current_list.append(parse(item))
            continue

        colon_pos = _find_unquoted_colon(stripped)
        if colon_pos <= 0:
            current_list = None
            continue
        key = stripped[:colon_pos].strip()
        parse = _unquote if key in raw_keys else _parse_value
        value_part = _remove_inline_comment(stripped[colon_pos + 1 :].strip())

        if not value_part:
            current_list = []
            result[key] = current_list
        elif value_part.startswith("[") and value_part.endswith("]"):
            current_list = None
            result[key] = [
                parse(v) for v in _split_flow_list(value_part[1:-1]) if v.strip()
            ]
        else:
            current_list = None
            result[key] = parse(value_part)

    # A key with neither inline value nor list items is null
    return {k: (None if v == [] else v) for k, v in result.items()}


def _find_unquoted_colon(s: str) -> int:
    """Find the position of the first colon not inside quotes."""
    in_single = False
    in_double = False
    for i, c in enumerate(s):
        if c == "'" and not in_double:
            in_single = not in_single
        elif c == '"' and not in_single:
            in_double = not in_double
        elif c == ":" and not in_single and not in_double:
            return i
    return -1


def _split_flow_list(s: str) -> list[str]:
    """Split ``a, 'b, c', d`` on commas outside quotes."""
    parts = []
    buf = ""
    quote = ""
    for c in s:
        if quote:
            if c == quote:
                quote = ""
        elif c in ("'", '"'):
            quote = c
        elif c == ",":
            parts.append(buf)
            buf = ""
            continue
        buf += c
    parts.append(buf)
    return parts


def _remove_inline_comment(s: str) -> str:
    """Remove inline comments from a value string."""
    # Only a '#' preceded by a space starts a comment
    in_single = False
    in_double = False
    for i, c in enumerate(s):
        if c == "'" and not in_double:
            in_single = not in_single
        elif c == '"' and not in_single:
            in_double = not in_double
        elif c == "#" and not in_single and not in_double and i > 0 and s[i - 1] == " ":
            return s[:i].rstrip()
    return s


def _unquote(s: str) -> str | None:
    """Strip matching quotes from a scalar without any type conversion."""
    s = s.strip()
    if not s:
        return None
    if len(s) >= 2 and s[0] == s[-1] and s[0] in ("'", '"'):
        return _parse_value(s)
    return s


def _parse_value(s: str) -> str | int | float | bool | None:
    """Parse a scalar YAML value."""
    s = s.strip()
    if not s:
        return None
    if s.lower() in ("null", "~", "none"):
        return None
    if s.lower() in ("true", "yes", "on"):
        return True
    if s.lower() in ("false", "no", "off"):
        return False

    # Quoted strings keep their whitespace
    if len(s) >= 2:
        if s[0] == '"' and s[-1] == '"':
            return s[1:-1].replace('\\"', '"').replace("\\t", "\t")
        if s[0] == "'" and s[-1] == "'":
            return s[1:-1].replace("''", "'")

    try:
        if "." in s:
            return float(s)
        return int(s)
    except ValueError:
        pass
    return s


# --- Config Dataclass ---

KEY_LIST_FIELDS = ("forward_keys", "backward_keys")


@dataclass
class Config:
    """Switcher configuration, read once at startup."""

    timeout: float = 3.0
    forward_keys: list[str] = field(default_factory=lambda: list(DEFAULT_FORWARD_KEYS))
    backward_keys: list[str] = field(default_factory=lambda: list(DEFAULT_BACKWARD_KEYS))
    hidden_marker: str = " "


# --- Config Loading ---


def _get_user_data_dir() -> Path:
    """Get the user's buf-cycle data directory ($HOME/.buf-cycle)."""
    return Path.home() / ".buf-cycle"


def _looks_like_path(name: str) -> bool:
    return "/" in name or "\\" in name or name.endswith(".yml")


def _get_config_search_paths(config_name: str) -> list[Path]:
    config_filename = f"{config_name}.yml"
    return [
        _get_user_data_dir() / "configs" / config_filename,
        Path.cwd() / "configs" / config_filename,
    ]


def _find_config_file(config_name_or_path: str) -> Path | None:
    """Find a config file by name or path.

    Search order:
    1. If it looks like a path (contains / or \\ or ends in .yml), treat as path
    2. $HOME/.buf-cycle/configs/<name>.yml
    3. Current working directory configs/<name>.yml
    """
    if _looks_like_path(config_name_or_path):
        path = Path(config_name_or_path).expanduser()
        return path if path.is_file() else None
    for path in _get_config_search_paths(config_name_or_path):
        if path.is_file():
            return path
    return None


def load_config(config_name_or_path: str | None = None) -> Config:
    """Load configuration by name or path.

    Raises:
        FileNotFoundError: a non-default config could not be found.
        ValueError: the file holds an invalid value.
    """
    if config_name_or_path is None:
        config_name_or_path = "default"

    config_path = _find_config_file(config_name_or_path)
    config = Config()

    if config_path is None:
        if config_name_or_path == "default":
            return config
        if _looks_like_path(config_name_or_path):
            raise FileNotFoundError(f"Config file not found: {config_name_or_path}")
        search_paths = _get_config_search_paths(config_name_or_path)
        paths_str = "\n  - ".join(str(p) for p in search_paths)
        raise FileNotFoundError(
            f"Config '{config_name_or_path}' not found. Searched:\n  - {paths_str}"
        )

    with open(config_path, encoding="utf-8") as f:
        data = parse_simple_yaml(f.read(), raw_keys=KEY_LIST_FIELDS)
    _merge_config(config, data)
    return config


def _merge_config(config: Config, data: dict):
    """Merge parsed YAML data into a Config object, validating as we go."""
    if "timeout" in data:
        value = data["timeout"]
        try:
            if isinstance(value, bool):
                raise TypeError(value)
            timeout = float(value)
        except (TypeError, ValueError):
            raise ValueError(f"timeout must be a number, got {data['timeout']!r}") from None
        if timeout <= 0:
            raise ValueError(f"timeout must be positive, got {timeout}")
        config.timeout = timeout

    for key in KEY_LIST_FIELDS:
        if key not in data:
            continue
        value = data[key]
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, list) or not value:
            raise ValueError(f"{key} must be a non-empty list of key specs")
        setattr(config, key, [str(v) for v in value])

    if "hidden_marker" in data:
        marker = data["hidden_marker"]
        if not isinstance(marker, str) or len(marker) != 1:
            raise ValueError(f"hidden_marker must be a single character, got {marker!r}")
        config.hidden_marker = marker
