"""Unit tests for message catalog lookup."""

from __future__ import annotations

from pathlib import Path

import pytest

from pageaudit.i18n import MessageCatalog, message_id


def test_message_catalog_resolves_locale_then_language_then_default() -> None:
    """Lookup should prefer the exact locale and fall back to the language table."""

    key = message_id("cumulative-layout-shift", "title")
    catalog = MessageCatalog(
        locale="de-AT",
        messages={
            "de": {key: "Kumulative Layoutverschiebung"},
            "de-CH": {key: "Layoutverschiebung (CH)"},
        },
    )

    assert key == "cumulative-layout-shift | title"
    assert catalog.resolve(key, "Cumulative Layout Shift") == "Kumulative Layoutverschiebung"
    assert catalog.with_locale("de-CH").resolve(key, "fallback") == "Layoutverschiebung (CH)"
    assert catalog.with_locale("cs-CZ").resolve(key, "fallback") == "fallback"


def test_message_catalog_loads_yaml(tmp_path: Path) -> None:
    """YAML catalogs should map locales to message tables."""

    path = tmp_path / "messages.yml"
    path.write_text(
        """
cs:
  "cumulative-layout-shift | title": " Kumulativní posun rozvržení "
""".strip(),
        encoding="utf-8",
    )

    catalog = MessageCatalog.from_yaml(path, locale="cs-CZ")

    assert (
        catalog.resolve("cumulative-layout-shift | title", "fallback")
        == "Kumulativní posun rozvržení"
    )


def test_message_catalog_rejects_non_mapping_yaml(tmp_path: Path) -> None:
    """Catalog payloads must be locale mappings."""

    path = tmp_path / "messages.yml"
    path.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ValueError, match="top-level mapping"):
        MessageCatalog.from_yaml(path)
