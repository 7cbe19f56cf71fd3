"""Helpers for ``__str__`` implementations of composable errors.

Rendering recurses through nested errors: each nested error is rendered with
its own ``__str__`` and every line of it is indented one level deeper than
its parent.
"""

from __future__ import annotations

import textwrap
from collections.abc import Iterable, Mapping
from typing import Any

from errorx.config import get_settings
from errorx.protocols import Error


def format_attrs(attrs: Mapping[str, Any]) -> str:
    """Return ``" [ k1=v1 k2=v2 ]"`` or an empty string without attributes."""
    if not attrs:
        return ""
    pairs = "".join(f" {key}={value}" for key, value in attrs.items())
    return f" [{pairs} ]"


def format_nested(nested: Iterable[Error], indent: str | None = None) -> str:
    if indent is None:
        indent = get_settings().render_indent
    parts: list[str] = []
    for err in nested:
        text = textwrap.indent(str(err), indent, lambda _: True)
        parts.append("\n" + text)
    return "".join(parts)


def render_error(err: Error, headline: str, indent: str | None = None) -> str:
    """Render *err* as ``<headline>: <cause> (code=<code>)`` plus details."""
    return (
        f"{headline}: {err.internal_error} (code={err.code})"
        f"{format_attrs(err.attrs)}"
        f"{format_nested(err.nested_errors, indent)}"
    )
