"""Pattern parsing and rendering.

A pattern such as::

    {orderCode}-{designType}{sequence} {productName} - {specifications} - KT: {dimensions}

is parsed once into ``LiteralText`` and ``Placeholder`` tokens. A trailing
``<ws>-<ws>`` run of literal text right before a placeholder is bound to
that placeholder as its separator, so an unfilled optional field drops
together with its dash:

    ``... CREEK 2.1EC - KT: 60 x 97 mm`` rather than ``... CREEK 2.1EC -  - KT: ...``

Placeholders are recognised for declared field keys and for any key the
caller supplies a value for; any other ``{...}`` text is kept verbatim in
the output. A key fills only its first placeholder; later repeats drop
like an unfilled field.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable, Mapping, MutableMapping
from dataclasses import dataclass
from datetime import datetime
from functools import lru_cache

from designcode.core.templates.models import DesignCodeTemplate

logger = logging.getLogger(__name__)

_TOKEN_RE = re.compile(r"\{([^{}]+)\}")
_SEPARATOR_RE = re.compile(r"\s*-\s*$")


@dataclass(frozen=True)
class LiteralText:
    text: str


@dataclass(frozen=True)
class Placeholder:
    key: str
    separator: str = ""


Token = LiteralText | Placeholder


def parse_pattern(pattern: str, keys: Iterable[str] | None = None) -> tuple[Token, ...]:
    """Split ``pattern`` into literal and placeholder tokens.

    Args:
        pattern: Pattern text with ``{key}`` placeholders.
        keys: Declared placeholder keys. When None every ``{...}`` is a placeholder.

    Returns:
        Tokens in pattern order. Adjacent literal text is merged.
    """
    key_set = None if keys is None else frozenset(keys)
    return _parse(pattern, key_set)


@lru_cache(maxsize=256)
def _parse(pattern: str, keys: frozenset[str] | None) -> tuple[Token, ...]:
    tokens: list[Token] = []
    pending = ""
    pos = 0

    for m in _TOKEN_RE.finditer(pattern):
        key = m.group(1)
        pending += pattern[pos : m.start()]
        pos = m.end()

        if keys is not None and key not in keys:
            pending += m.group(0)
            continue

        sep_match = _SEPARATOR_RE.search(pending)
        separator = sep_match.group(0) if sep_match else ""
        literal = pending[: len(pending) - len(separator)]
        if literal:
            tokens.append(LiteralText(literal))
        tokens.append(Placeholder(key, separator))
        pending = ""

    pending += pattern[pos:]
    if pending:
        tokens.append(LiteralText(pending))
    return tuple(tokens)


def render(tokens: Iterable[Token], values: Mapping[str, str]) -> str:
    """Render tokens, dropping placeholders (and their separators) without a value.

    Each value fills the first placeholder for its key only.
    """
    parts: list[str] = []
    used: set[str] = set()
    for token in tokens:
        if isinstance(token, LiteralText):
            parts.append(token.text)
            continue
        value = values.get(token.key)
        if value and token.key not in used:
            used.add(token.key)
            parts.append(token.separator)
            parts.append(value)
    return "".join(parts)


class PatternCompiler:
    """Renders a template pattern against a value map.

    Date fields left empty are auto-filled with today's date before
    rendering, so they behave like any other supplied value.

    Args:
        date_format: strftime format for auto-filled dates (day/month/year).
        clock: Callable returning "now"; defaults to local time.
    """

    def __init__(
        self,
        *,
        date_format: str = "%d/%m/%Y",
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.date_format = date_format
        self._clock = clock or datetime.now

    def today(self) -> str:
        return self._clock().strftime(self.date_format)

    def autofill(self, template: DesignCodeTemplate, values: MutableMapping[str, str]) -> None:
        """Fill empty ``date`` fields with today's date. Mutates ``values``."""
        for field in template.date_fields:
            if not values.get(field.key):
                values[field.key] = self.today()
                logger.debug(f"Auto-filled {field.key}={values[field.key]} for {template.id}")

    def compile(self, template: DesignCodeTemplate, values: MutableMapping[str, str]) -> str:
        """Auto-fill dates, then render ``template.pattern``.

        Mutates ``values`` with any auto-filled dates so callers see what was
        rendered.
        """
        self.autofill(template, values)
        keys = template.field_keys + tuple(k for k, v in values.items() if v)
        tokens = parse_pattern(template.pattern, keys)
        return render(tokens, values)
