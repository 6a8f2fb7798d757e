"""CLI entry point for dyadic-trust.

Invoked as::

    dyadic-trust [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m dyadic_trust.cli.main

Commands
--------
version   Show version information
stages    Show the weighting constants of every relationship stage
decide    Compute a trust decision for a fresh relationship
replay    Replay an antecedent file into trustworthiness factors
predict   Predict whether a trustor would confide in or help a trustee
"""
from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from dyadic_trust.relationship import (
    Direction,
    Relationship,
    RelationshipStage,
    RelPath,
    SharedPath,
    TrustPath,
)
from dyadic_trust.trust import (
    AntecedentHistory,
    LifeDomain,
    StakesLevel,
    TrustAntecedent,
    TrustworthinessFactors,
)

console = Console()

_STAGE_CHOICE = click.Choice([stage.value for stage in RelationshipStage])
_STAKES_CHOICE = click.Choice([stakes.value for stakes in StakesLevel])


# ------------------------------------------------------------------
# Root group
# ------------------------------------------------------------------


@click.group()
@click.version_option(package_name="dyadic-trust")
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"]),
    default="warning",
    show_default=True,
    help="Logging verbosity.",
)
def cli(log_level: str) -> None:
    """Dyadic trust modelling: stages, antecedent replay and trust decisions"""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from dyadic_trust import __version__

    console.print(f"[bold]dyadic-trust[/bold] v{__version__}")


# ------------------------------------------------------------------
# stages
# ------------------------------------------------------------------


@cli.command(name="stages")
def stages_command() -> None:
    """Show the weighting constants of every relationship stage."""
    table = Table(title="Relationship Stages", show_header=True)
    table.add_column("Stage", style="cyan")
    table.add_column("Propensity", justify="right")
    table.add_column("Trustworthiness", justify="right")
    table.add_column("Risk", justify="right")
    table.add_column("Certainty", justify="right")
    table.add_column("Confidence", justify="right")

    for stage in RelationshipStage:
        constants = stage.constants
        table.add_row(
            stage.label,
            f"{constants.propensity_weight:.1f}",
            f"{constants.trustworthiness_weight:.1f}",
            f"{constants.risk_modifier:+.1f}",
            f"{constants.decision_certainty:.1f}",
            f"{constants.trustee_confidence:.1f}",
        )

    console.print(table)
    for stage in RelationshipStage:
        console.print(f"  [cyan]{stage.label}[/cyan]: {stage.description}")


# ------------------------------------------------------------------
# decide
# ------------------------------------------------------------------


def _trust_options(func):  # type: ignore[no-untyped-def]
    """Options shared by commands that build a fresh relationship."""
    options = [
        click.option("--stage", type=_STAGE_CHOICE, default="stranger", show_default=True),
        click.option(
            "--competence", type=float, default=0.3, show_default=True,
            help="Base competence of the trustee (0-1), applied to every life domain.",
        ),
        click.option(
            "--benevolence", type=float, default=0.3, show_default=True,
            help="Base benevolence of the trustee (0-1).",
        ),
        click.option(
            "--integrity", type=float, default=0.3, show_default=True,
            help="Base integrity of the trustee (0-1).",
        ),
        click.option(
            "--history", type=float, default=0.0, show_default=True,
            help="Shared history (0-1).",
        ),
        click.option(
            "--propensity", "-p", type=float, default=0.5, show_default=True,
            help="Trustor's general propensity to trust (0-1).",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _build_relationship(
    stage: str,
    competence: float,
    benevolence: float,
    integrity: float,
    history: float,
) -> Relationship:
    """A trustor/trustee relationship with the given trustee bases."""
    relationship = Relationship("trustor", "trustee", stage=RelationshipStage(stage))
    view = Direction.A_TO_B
    for domain in LifeDomain:
        relationship.set_base(RelPath.of_trust(view, TrustPath.COMPETENCE, domain), competence)
    relationship.set_base(RelPath.of_trust(view, TrustPath.BENEVOLENCE), benevolence)
    relationship.set_base(RelPath.of_trust(view, TrustPath.INTEGRITY), integrity)
    relationship.add_delta(RelPath.of_shared(SharedPath.HISTORY), history)
    return relationship


@cli.command(name="decide")
@_trust_options
@click.option("--stakes", "-s", type=_STAKES_CHOICE, default="medium", show_default=True)
@click.option(
    "--multiplier", "-m", type=float, default=1.0, show_default=True,
    help="Context multiplier (0-2).",
)
@click.option(
    "--json", "as_json", is_flag=True, default=False, help="Emit JSON instead of a table."
)
def decide_command(
    stage: str,
    competence: float,
    benevolence: float,
    integrity: float,
    history: float,
    propensity: float,
    stakes: str,
    multiplier: float,
    as_json: bool,
) -> None:
    """Compute the trustor's willingness to trust a fresh trustee."""
    relationship = _build_relationship(stage, competence, benevolence, integrity, history)
    decision = relationship.compute_trust_decision_with_context(
        Direction.A_TO_B, propensity, StakesLevel(stakes), multiplier
    )

    if as_json:
        click.echo(json.dumps(decision.to_dict(), indent=2))
        return

    title = f"Trust Decision: {relationship.stage.label}, {stakes} stakes"
    table = Table(title=title, show_header=True)
    table.add_column("Measure", style="cyan")
    table.add_column("Value", justify="right")
    for name, value in decision.to_dict().items():
        table.add_row(name.replace("_", " ").capitalize(), f"{value:.3f}")
    console.print(table)


# ------------------------------------------------------------------
# replay
# ------------------------------------------------------------------


def _load_antecedents(path: Path) -> list[TrustAntecedent]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError("antecedent file must contain a JSON list")
    return [TrustAntecedent.from_dict(entry) for entry in data]


@cli.command(name="replay")
@click.argument(
    "antecedent_file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option(
    "--json", "as_json", is_flag=True, default=False, help="Emit JSON instead of a table."
)
def replay_command(antecedent_file: Path, as_json: bool) -> None:
    """Replay ANTECEDENT_FILE into a fresh set of trustworthiness factors.

    The file holds a JSON list of antecedent objects, each with
    ``timestamp``, ``antecedent_type``, ``direction`` and ``magnitude`` and
    optionally ``context`` and ``life_domain``.
    """
    try:
        antecedents = _load_antecedents(antecedent_file)
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        console.print(f"[red]Error:[/red] could not read {antecedent_file}: {exc}")
        sys.exit(1)

    history = AntecedentHistory()
    for antecedent in antecedents:
        history.append(antecedent)

    factors = TrustworthinessFactors()
    factors.recompute_from_antecedents(history)

    result = {
        "antecedents": len(history),
        "competence": {domain.value: factors.competence_in(domain) for domain in LifeDomain},
        "benevolence": factors.benevolence_effective(),
        "integrity": factors.integrity_effective(),
        "overall": factors.overall(),
    }

    if as_json:
        click.echo(json.dumps(result, indent=2))
        return

    table = Table(title=f"Trustworthiness after {len(history)} antecedent(s)", show_header=True)
    table.add_column("Factor", style="cyan")
    table.add_column("Effective", justify="right")
    for domain in LifeDomain:
        table.add_row(f"Competence ({domain.value})", f"{factors.competence_in(domain):.3f}")
    table.add_row("Benevolence", f"{factors.benevolence_effective():.3f}")
    table.add_row("Integrity", f"{factors.integrity_effective():.3f}")
    console.print(table)
    console.print(f"\n  Overall: [bold]{factors.overall():.3f}[/bold]")


# ------------------------------------------------------------------
# predict
# ------------------------------------------------------------------


@cli.command(name="predict")
@_trust_options
@click.option(
    "--risk-level", "-r", type=float, default=0.5, show_default=True,
    help="Risk of the act (0-1); selects stakes and raises the threshold.",
)
def predict_command(
    stage: str,
    competence: float,
    benevolence: float,
    integrity: float,
    history: float,
    propensity: float,
    risk_level: float,
) -> None:
    """Predict whether the trustor would confide in or help the trustee."""
    relationship = _build_relationship(stage, competence, benevolence, integrity, history)

    confide = relationship.would_a_confide_in_b(propensity, risk_level)
    helps = relationship.would_a_help_b(propensity, risk_level)

    console.print(f"  Would confide: {_verdict(confide)}")
    console.print(f"  Would help:    {_verdict(helps)}")


def _verdict(value: bool) -> str:
    return "[green]yes[/green]" if value else "[red]no[/red]"


if __name__ == "__main__":
    cli()
