"""Reading an editor settings document from JSON."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from typing import Any

SAMPLE_JSON = (
    "{"
    '"encoding" : "UTF-8",'
    '"plug-ins" : ['
    '"python",'
    '"c++",'
    '"ruby"'
    "],"
    '"indent" : { "length" : 3, "use_space" : true }'
    "}"
)


@dataclass
class Settings:
    """Encoding, plug-in names and indentation of an editor."""

    encoding: str = ""
    plugins: list[str] = field(default_factory=list)
    indent_length: int = 0
    use_space: bool = False


def _to_str(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    return ""


def _to_int(value: Any) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return round(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return 0
    return 0


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() not in ("", "0", "false")
    return False


def parse_settings(text: str | bytes) -> Settings:
    """Parse a settings document; missing or mistyped fields take empty defaults.

    Raises ValueError if the text is not JSON or not a JSON object.
    """
    document = json.loads(text)
    if not isinstance(document, dict):
        raise ValueError("settings document is not a JSON object")
    plugins = document.get("plug-ins")
    indent = document.get("indent")
    if not isinstance(plugins, list):
        plugins = []
    if not isinstance(indent, dict):
        indent = {}
    return Settings(
        encoding=_to_str(document.get("encoding")),
        plugins=[_to_str(plugin) for plugin in plugins],
        indent_length=_to_int(indent.get("length")),
        use_space=_to_bool(indent.get("use_space")),
    )


def format_settings(settings: Settings) -> str:
    """Render settings as the report lines the demo prints."""
    lines = [f'encoding: "{settings.encoding}"', "plugins:"]
    lines.extend(f'\t- "{plugin}"' for plugin in settings.plugins)
    lines.append(f"length: {settings.indent_length}")
    lines.append(f"use_space: {'true' if settings.use_space else 'false'}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    try:
        if args:
            with open(args[0], encoding="utf-8") as handle:
                text = handle.read()
        else:
            text = SAMPLE_JSON
        settings = parse_settings(text)
    except (OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1
    print(format_settings(settings))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())