"""Key-based localized string lookup for audit titles and descriptions.

Responsibilities:
- Define the `StringResolver` capability injected into audits.
- Provide an in-memory `MessageCatalog` with per-locale overrides and
  English fallbacks supplied by each audit's UI strings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Protocol

import yaml

from .parsing import normalize_optional_string


class StringResolver(Protocol):
    """Protocol for resolving a message id to display text."""

    def resolve(self, message_id: str, default: str) -> str:
        """Return localized text for `message_id`, or `default` when unknown."""


def message_id(module: str, key: str) -> str:
    """Build a stable message id such as `cumulative-layout-shift | title`."""

    return f"{module} | {key}"


@dataclass(frozen=True, slots=True)
class MessageCatalog:
    """Locale-keyed message table.

    Attributes:
        locale: Active BCP-47 locale.
        messages: Mapping of locale to message id to localized text.
    """

    locale: str = "en-US"
    messages: Mapping[str, Mapping[str, str]] = field(default_factory=dict)

    def resolve(self, message_id: str, default: str) -> str:
        """Resolve the exact locale first, then its language, then `default`."""

        language = self.locale.replace("_", "-").split("-", 1)[0]
        for candidate in (self.locale, language):
            table = self.messages.get(candidate)
            if table and message_id in table:
                return table[message_id]
        return default

    def with_locale(self, locale: str) -> MessageCatalog:
        """Return a catalog sharing messages but resolving for another locale."""

        return MessageCatalog(locale=locale, messages=self.messages)

    @staticmethod
    def from_yaml(path: Path, locale: str = "en-US") -> MessageCatalog:
        """Load `{locale: {message_id: text}}` from a YAML file."""

        payload = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        return MessageCatalog(locale=locale, messages=_parse_messages(payload, path))


def _parse_messages(payload: Any, path: Path) -> dict[str, dict[str, str]]:
    """Validate a locale catalog payload into plain nested dictionaries."""

    if not isinstance(payload, Mapping):
        raise ValueError(f"Message catalog `{path}` must contain a top-level mapping.")

    parsed: dict[str, dict[str, str]] = {}
    for raw_locale, raw_table in payload.items():
        locale = normalize_optional_string(raw_locale)
        if locale is None or not isinstance(raw_table, Mapping):
            raise ValueError(
                f"Message catalog `{path}` must map locale names to message tables."
            )
        table: dict[str, str] = {}
        for raw_id, raw_text in raw_table.items():
            key = normalize_optional_string(raw_id)
            text = normalize_optional_string(raw_text)
            if key is None or text is None:
                raise ValueError(
                    f"Message catalog `{path}` has a blank entry under `{locale}`."
                )
            table[key] = text
        parsed[locale] = table
    return parsed
