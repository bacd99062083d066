"""
Dotted-key resolution and {placeholder} interpolation over translation trees.
"""

import re
from collections.abc import Mapping
from typing import Any

from core.domain.models import Resolution

KEY_SEPARATOR = "."

# Non-greedy, single line: "{a} {b}" yields two placeholders
PLACEHOLDER_RE = re.compile(r"{(.*?)}")


def resolve_key(tree: Any, key: str) -> Resolution:
    """
    Walk a dotted key through a translation tree.

    A missing segment, or a segment reached through a leaf instead of a
    sub-tree, yields Resolution.missing() instead of raising.
    """
    node = tree
    for part in key.split(KEY_SEPARATOR):
        if not isinstance(node, Mapping) or part not in node:
            return Resolution.missing()
        node = node[part]
    return Resolution.of(node)


def interpolate(template: str, variables: Mapping) -> str:
    """Replace {name} with str(variables[name]); unknown or None variables stay as {name}."""

    def _substitute(match: "re.Match") -> str:
        name = match.group(1)
        value = variables.get(name)
        if value is None:
            return match.group(0)
        return str(value)

    return PLACEHOLDER_RE.sub(_substitute, template)
