"""Command-line interface for pageaudit.

Responsibilities:
- Expose user-facing commands for scoring metric values and running audits.
- Convert CLI arguments into `AuditConfig` and audit contexts.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Annotated

import typer

from .audits.base import DEFAULT_PASS, TRACES_ARTIFACT
from .audits.cumulative_layout_shift import AUDIT_ID
from .cli_rendering import echo_audit_list, echo_outcome, exit_with_command_error
from .computed.provider import StaticMetricProvider
from .config import AuditConfig, ConfigLoader
from .errors import ConfigError
from .i18n import MessageCatalog
from .models.datatypes import RawMetricValue, ScoreCalibration
from .pipeline.runner import AuditRunner
from .registry import builtin_metadata, default_registry
from .scoring import compute_log_normal_score
from .telemetry.logger import RunLogger

app = typer.Typer(
    name="pageaudit",
    no_args_is_help=True,
    help="pageaudit CLI.",
)


def _load_config(config_path: Path | None, locale: str | None) -> AuditConfig:
    """Load YAML or environment config and map failures to config errors."""

    try:
        if config_path is None:
            config = ConfigLoader.from_env()
        else:
            config = ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise ConfigError(
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        source = f"config file `{config_path}`" if config_path else "environment config"
        raise ConfigError(
            detail=f"Invalid {source}: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc

    if locale is None:
        return config
    return AuditConfig(
        locale=locale,
        continue_on_error=config.continue_on_error,
        calibrations=config.calibrations,
        settings=config.settings,
    )


def _load_catalog(messages: Path | None, locale: str) -> MessageCatalog:
    """Load an optional message catalog for localized titles and descriptions."""

    if messages is None:
        return MessageCatalog(locale=locale)
    try:
        return MessageCatalog.from_yaml(messages, locale=locale)
    except (OSError, ValueError) as exc:
        raise ConfigError(
            detail=f"Failed to load message catalog `{messages}`: {exc}",
            hint="Provide a YAML mapping of locale -> message id -> text.",
        ) from exc


@app.command("score")
def score_command(
    value: Annotated[float, typer.Argument(help="Measured metric value (lower is better).")],
    podr: Annotated[
        float, typer.Option("--podr", help="Point of diminishing returns (scores 0.9).")
    ] = 0.1,
    median: Annotated[
        float, typer.Option("--median", help="Typical measurement (scores 0.5).")
    ] = 0.5,
) -> None:
    """Score one metric value on the log-normal curve."""

    try:
        calibration = ScoreCalibration(podr=podr, median=median)
        score = compute_log_normal_score(value, calibration.podr, calibration.median)
    except Exception as exc:
        exit_with_command_error("score", exc)

    typer.echo(f"Score: {score:.2f}")


@app.command("audit")
def audit_command(
    value: Annotated[float, typer.Argument(help="Measured cumulative layout shift.")],
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to YAML config file with calibration overrides."),
    ] = None,
    locale: Annotated[
        str | None, typer.Option("--locale", help="Locale for display values.")
    ] = None,
    explanation: Annotated[
        str | None, typer.Option("--explanation", help="Explanation attached to the value.")
    ] = None,
) -> None:
    """Run the cumulative layout shift audit on an already measured value."""

    try:
        config = _load_config(config_file, locale)
        provider = StaticMetricProvider(RawMetricValue(value=value, explanation=explanation))
        registry = default_registry(provider, MessageCatalog(locale=config.locale))
        runner = AuditRunner(
            registry,
            run_logger=RunLogger(),
            continue_on_error=config.continue_on_error,
        )
        artifacts = {TRACES_ARTIFACT: {DEFAULT_PASS: {"source": "cli"}}}
        report = asyncio.run(runner.run(artifacts, config.context_for, audit_ids=[AUDIT_ID]))
    except Exception as exc:
        exit_with_command_error("audit", exc)

    outcome = report.outcome(AUDIT_ID)
    echo_outcome(outcome)
    if outcome.failed:
        raise typer.Exit(code=1)


@app.command("audits")
def audits_command(
    locale: Annotated[
        str, typer.Option("--locale", help="Locale for titles and descriptions.")
    ] = "en-US",
    messages: Annotated[
        Path | None,
        typer.Option("--messages", help="YAML message catalog with localized strings."),
    ] = None,
) -> None:
    """List registered audits with their default calibration."""

    try:
        catalog = _load_catalog(messages, locale)
        descriptors = list(builtin_metadata(catalog))
    except Exception as exc:
        exit_with_command_error("audits", exc)

    echo_audit_list(descriptors)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
