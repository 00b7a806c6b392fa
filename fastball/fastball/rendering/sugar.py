"""Rewrite ``{{ expr }}`` shorthand into native ``<%= expr %>`` tags."""

from __future__ import annotations

import re

from jinja2.ext import Extension

_OPEN = re.compile(r"\{\{ *")
_CLOSE = re.compile(r" *\}\}")

NATIVE_OPEN = "<%= "
NATIVE_CLOSE = " %>"


def expand_sugar(source: str) -> str:
    """Replace every ``{{`` and ``}}`` marker with the native tag delimiters.

    Spaces hugging the braces are dropped; the expression between them and
    all other text, native tags included, pass through unchanged.
    """
    source = _OPEN.sub(NATIVE_OPEN, source)
    return _CLOSE.sub(NATIVE_CLOSE, source)


class BraceSugarExtension(Extension):
    """Applies :func:`expand_sugar` to every template source before lexing."""

    def preprocess(
        self, source: str, name: str | None, filename: str | None = None
    ) -> str:
        return expand_sugar(source)
