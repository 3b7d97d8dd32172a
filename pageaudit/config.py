"""Configuration model and loaders for pageaudit.

Responsibilities:
- Define run configuration as a typed dataclass.
- Provide loader entry points for file- and environment-based configuration.
- Build per-audit `AuditContext` values with calibration overrides.

Key types:
- `AuditConfig`: normalized runtime settings for an audit run.
- `ConfigLoader`: static construction helpers for `AuditConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .errors import CalibrationError
from .models.datatypes import AuditContext, ScoreCalibration
from .parsing import normalize_optional_string, parse_permissive_boolean, parse_positive_float


_DEFAULT_LOCALE = "en-US"
_SCORING_OPTION_KEYS = frozenset({"podr", "median"})


@dataclass(frozen=True, slots=True)
class AuditConfig:
    """Top-level runtime configuration for an audit run.

    Attributes:
        locale: Locale for titles, descriptions, and display values.
        continue_on_error: Record failed audits and keep going instead of aborting.
        calibrations: Per-audit calibration overrides keyed by audit id.
        settings: Run settings forwarded to metric providers.
    """

    locale: str = _DEFAULT_LOCALE
    continue_on_error: bool = True
    calibrations: Mapping[str, ScoreCalibration] = field(default_factory=dict)
    settings: Mapping[str, str] = field(default_factory=dict)

    def validate(self) -> None:
        """Validate configuration invariants."""

        if normalize_optional_string(self.locale) is None:
            raise ValueError("`locale` must be a non-empty string.")

    def context_for(self, audit_id: str) -> AuditContext:
        """Return the audit context carrying this audit's calibration override."""

        return AuditContext(
            options=self.calibrations.get(audit_id),
            locale=self.locale,
            settings=dict(self.settings),
        )


class ConfigLoader:
    """Factory methods for creating `AuditConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset({"locale", "continue_on_error", "audits", "settings"})

    @staticmethod
    def from_yaml(path: Path) -> AuditConfig:
        """Create a validated config from a YAML file."""

        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return ConfigLoader.from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> AuditConfig:
        """Create a validated config from environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        locale = normalize_optional_string(env_map.get("PAGEAUDIT_LOCALE")) or _DEFAULT_LOCALE
        continue_on_error = True
        raw_continue = normalize_optional_string(env_map.get("PAGEAUDIT_CONTINUE_ON_ERROR"))
        if raw_continue is not None:
            parsed = parse_permissive_boolean(raw_continue)
            if parsed is None:
                raise ValueError(
                    "Environment variable `PAGEAUDIT_CONTINUE_ON_ERROR` must be a boolean value "
                    "(`true`/`false`, `1`/`0`, `yes`/`no`)."
                )
            continue_on_error = parsed

        config = AuditConfig(locale=locale, continue_on_error=continue_on_error)
        config.validate()
        return config

    @staticmethod
    def from_mapping(payload: Mapping[str, Any], source_label: str = "config") -> AuditConfig:
        """Create a validated config from an already parsed mapping."""

        unknown = sorted(set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS))
        if unknown:
            raise ValueError(f"{source_label} includes unsupported key(s): {', '.join(unknown)}.")

        locale = normalize_optional_string(payload.get("locale")) or _DEFAULT_LOCALE
        continue_on_error = True
        if "continue_on_error" in payload:
            parsed = parse_permissive_boolean(payload["continue_on_error"])
            if parsed is None:
                raise ValueError(
                    f"{source_label} field `continue_on_error` must be a boolean value "
                    "(`true`/`false`, `1`/`0`, `yes`/`no`)."
                )
            continue_on_error = parsed

        config = AuditConfig(
            locale=locale,
            continue_on_error=continue_on_error,
            calibrations=ConfigLoader._calibrations(payload.get("audits"), source_label),
            settings=ConfigLoader._string_map(payload.get("settings"), "settings", source_label),
        )
        config.validate()
        return config

    @staticmethod
    def _calibrations(raw: Any, source_label: str) -> dict[str, ScoreCalibration]:
        """Parse `audits.<id>.{podr, median}` overrides."""

        if raw is None:
            return {}
        if not isinstance(raw, Mapping):
            raise ValueError(f"{source_label} field `audits` must be a mapping/object.")

        calibrations: dict[str, ScoreCalibration] = {}
        for raw_id, options in raw.items():
            audit_id = normalize_optional_string(raw_id)
            if audit_id is None:
                raise ValueError(f"{source_label} field `audits` contains a blank audit id.")
            calibrations[audit_id] = ConfigLoader.calibration_from_options(
                options, f"{source_label} audit `{audit_id}`"
            )
        return calibrations

    @staticmethod
    def calibration_from_options(options: Any, source_label: str) -> ScoreCalibration:
        """Parse scoring options; exactly `podr` and `median` are recognized."""

        if not isinstance(options, Mapping):
            raise ValueError(f"{source_label} scoring options must be a mapping/object.")
        unknown = sorted(set(options).difference(_SCORING_OPTION_KEYS))
        if unknown:
            raise ValueError(
                f"{source_label} includes unsupported scoring option(s): {', '.join(unknown)}."
            )
        missing = sorted(_SCORING_OPTION_KEYS.difference(options))
        if missing:
            raise ValueError(
                f"{source_label} is missing scoring option(s): {', '.join(missing)}."
            )

        podr = parse_positive_float(options["podr"], "podr")
        median = parse_positive_float(options["median"], "median")
        try:
            return ScoreCalibration(podr=podr, median=median)
        except CalibrationError as exc:
            raise CalibrationError(f"{source_label}: {exc}") from exc

    @staticmethod
    def _string_map(raw: Any, key: str, source_label: str) -> dict[str, str]:
        """Read an optional mapping with non-empty string keys and values."""

        if raw is None:
            return {}
        if not isinstance(raw, Mapping):
            raise ValueError(f"{source_label} field `{key}` must be a mapping/object.")

        normalized: dict[str, str] = {}
        for raw_key, raw_value in raw.items():
            key_value = normalize_optional_string(raw_key)
            value_value = normalize_optional_string(raw_value)
            if key_value is None:
                raise ValueError(f"{source_label} field `{key}` contains a blank key.")
            if value_value is None:
                raise ValueError(
                    f"{source_label} field `{key}` contains blank value for `{key_value}`."
                )
            normalized[key_value] = value_value
        return normalized
