"""Case-insensitive filtering of names by regular expression, wildcard or fixed string."""

from __future__ import annotations

import re
from enum import Enum
from typing import Iterable

_COLOR_NAMES = (
    "aliceblue", "antiquewhite", "aqua", "aquamarine", "azure", "beige", "bisque",
    "black", "blanchedalmond", "blue", "blueviolet", "brown", "burlywood", "cadetblue",
    "chartreuse", "chocolate", "coral", "cornflowerblue", "cornsilk", "crimson", "cyan",
    "darkblue", "darkcyan", "darkgoldenrod", "darkgray", "darkgreen", "darkgrey",
    "darkkhaki", "darkmagenta", "darkolivegreen", "darkorange", "darkorchid", "darkred",
    "darksalmon", "darkseagreen", "darkslateblue", "darkslategray", "darkslategrey",
    "darkturquoise", "darkviolet", "deeppink", "deepskyblue", "dimgray", "dimgrey",
    "dodgerblue", "firebrick", "floralwhite", "forestgreen", "fuchsia", "gainsboro",
    "ghostwhite", "gold", "goldenrod", "gray", "green", "greenyellow", "grey", "honeydew",
    "hotpink", "indianred", "indigo", "ivory", "khaki", "lavender", "lavenderblush",
    "lawngreen", "lemonchiffon", "lightblue", "lightcoral", "lightcyan",
    "lightgoldenrodyellow", "lightgray", "lightgreen", "lightgrey", "lightpink",
    "lightsalmon", "lightseagreen", "lightskyblue", "lightslategray", "lightslategrey",
    "lightsteelblue", "lightyellow", "lime", "limegreen", "linen", "magenta", "maroon",
    "mediumaquamarine", "mediumblue", "mediumorchid", "mediumpurple", "mediumseagreen",
    "mediumslateblue", "mediumspringgreen", "mediumturquoise", "mediumvioletred",
    "midnightblue", "mintcream", "mistyrose", "moccasin", "navajowhite", "navy",
    "oldlace", "olive", "olivedrab", "orange", "orangered", "orchid", "palegoldenrod",
    "palegreen", "paleturquoise", "palevioletred", "papayawhip", "peachpuff", "peru",
    "pink", "plum", "powderblue", "purple", "red", "rosybrown", "royalblue",
    "saddlebrown", "salmon", "sandybrown", "seagreen", "seashell", "sienna", "silver",
    "skyblue", "slateblue", "slategray", "slategrey", "snow", "springgreen", "steelblue",
    "tan", "teal", "thistle", "tomato", "transparent", "turquoise", "violet", "wheat",
    "white", "whitesmoke", "yellow", "yellowgreen",
)


class PatternSyntax(Enum):
    """How filter text is interpreted."""

    REG_EXP = "Regular expression"
    WILDCARD = "Wildcard"
    FIXED_STRING = "Fixed string"


def color_names() -> list[str]:
    """The named colours, in alphabetical order."""
    return list(_COLOR_NAMES)


def _wildcard_to_regex(text: str) -> str:
    parts: list[str] = []
    position = 0
    while position < len(text):
        char = text[position]
        if char == "*":
            parts.append(".*")
        elif char == "?":
            parts.append(".")
        elif char == "[":
            end = text.find("]", position + 2 if text[position + 1:position + 2] in ("!", "]") else position + 1)
            if end == -1:
                parts.append(re.escape(char))
            else:
                body = text[position + 1:end]
                if body.startswith("!"):
                    body = "^" + body[1:]
                parts.append("[" + body.replace("\\", "\\\\") + "]")
                position = end
        else:
            parts.append(re.escape(char))
        position += 1
    return "".join(parts)


def compile_filter(text: str, syntax: PatternSyntax = PatternSyntax.REG_EXP) -> re.Pattern[str]:
    """Compile filter text, ignoring case; ValueError if it is not a valid pattern."""
    if syntax is PatternSyntax.FIXED_STRING:
        pattern = re.escape(text)
    elif syntax is PatternSyntax.WILDCARD:
        pattern = _wildcard_to_regex(text)
    else:
        pattern = text
    try:
        return re.compile(pattern, re.IGNORECASE)
    except re.error as exc:
        raise ValueError(f"invalid filter {text!r}: {exc}") from exc


def filter_names(
    names: Iterable[str], text: str, syntax: PatternSyntax = PatternSyntax.REG_EXP
) -> list[str]:
    """Names in which the filter matches somewhere; an invalid filter matches nothing."""
    try:
        pattern = compile_filter(text, syntax)
    except ValueError:
        return []
    return [name for name in names if pattern.search(name)]