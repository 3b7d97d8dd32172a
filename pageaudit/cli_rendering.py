"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
audit results, and audit listings.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import AuditError, ConfigError
from .models.datatypes import AuditMetadata, AuditOutcome


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, AuditError):
        typer.secho(
            f"{command_name} failed at audit `{exc.audit_id}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        hint = exc.hint
    elif isinstance(exc, ConfigError):
        typer.secho(f"{command_name} failed at config: {exc.detail}", fg=typer.colors.RED, err=True)
        hint = exc.hint
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
        hint = None
    if hint:
        typer.secho(f"Hint: {hint}", fg=typer.colors.YELLOW, err=True)
    raise typer.Exit(code=1) from exc


def _format_score(score: float | None) -> str:
    """Render a score with report precision, or `n/a` when absent."""

    return "n/a" if score is None else f"{score:.2f}"


def echo_outcome(outcome: AuditOutcome) -> None:
    """Print one audit outcome."""

    typer.echo(f"Audit: {outcome.audit_id}")
    if outcome.result is None:
        typer.echo("Score: n/a (error)")
        typer.echo(f"Error: {outcome.error_message}")
        return
    typer.echo(f"Score: {_format_score(outcome.result.score)}")
    typer.echo(f"Numeric value: {outcome.result.numeric_value}")
    typer.echo(f"Display value: {outcome.result.display_value}")
    if outcome.result.explanation:
        typer.echo(f"Explanation: {outcome.result.explanation}")


def echo_audit_list(descriptors: list[AuditMetadata]) -> None:
    """Print compact deterministic audit descriptor rows."""

    for meta in sorted(descriptors, key=lambda descriptor: descriptor.id):
        calibration = meta.default_calibration
        artifacts = ",".join(sorted(meta.required_artifacts))
        typer.echo(
            f"{meta.id}: {meta.title} "
            f"(mode={meta.scoring_mode.value} artifacts={artifacts} "
            f"podr={calibration.podr} median={calibration.median})"
        )
