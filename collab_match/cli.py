"""
collab-match Command Line Interface

Provides CLI commands for ranking community members against project
requirements and inspecting the matching pool.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from collab_match import __app_name__, __version__
from collab_match.core.matching import MatchingEngine, create_sample_engine
from collab_match.data import InputFileError, load_profiles_file, load_requirements_file
from collab_match.utils.config import get_settings
from collab_match.utils.logger import setup_logging

app = typer.Typer(
    name="collab-match",
    help="Match community collaborators to organizing projects",
    add_completion=False,
)
console = Console()

PROFILES_OPTION = typer.Option(
    None,
    "--profiles",
    "-p",
    help="JSON file with the profile pool (defaults to the sample community pool)",
)


@app.callback()
def main() -> None:
    """Configure logging before any command runs."""
    setup_logging()


def _build_engine(profiles_file: Optional[Path], threshold: Optional[float] = None) -> MatchingEngine:
    try:
        if profiles_file is None:
            return create_sample_engine(threshold=threshold)
        return MatchingEngine(profiles=load_profiles_file(profiles_file), threshold=threshold)
    except (InputFileError, ValueError) as e:
        console.print(f"[red]Error loading profiles: {e}[/red]")
        raise typer.Exit(1)


def _level_color(level: str) -> str:
    return {
        "excellent": "green",
        "good": "blue",
        "fair": "yellow",
    }.get(level, "red")


@app.command()
def version():
    """Show application version."""
    console.print(f"[bold blue]{__app_name__}[/bold blue] version [green]{__version__}[/green]")


@app.command()
def info():
    """Show the active configuration."""
    settings = get_settings()

    table = Table(title="collab-match Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Environment", settings.environment)
    table.add_row("Debug Mode", str(settings.debug))
    table.add_row("Match Threshold", f"{settings.matching.threshold:g}")
    for name, weight in settings.matching.weights.items():
        table.add_row(f"Weight: {name}", f"{weight:.2f}")
    table.add_row("Max Reasons", str(settings.matching.max_reasons))
    table.add_row("Log Level", settings.logging.level)

    console.print(table)


@app.command()
def match(
    requirements_file: Path = typer.Argument(..., help="JSON file with project requirements"),
    profiles_file: Optional[Path] = PROFILES_OPTION,
    top_n: int = typer.Option(10, "--top", "-n", help="Number of top matches to show"),
    threshold: Optional[float] = typer.Option(
        None, "--threshold", "-t", help="Minimum match score (defaults to settings)"
    ),
):
    """Rank profiles against project requirements."""
    try:
        requirements = load_requirements_file(requirements_file)
    except InputFileError as e:
        console.print(f"[red]Error loading requirements: {e}[/red]")
        raise typer.Exit(1)

    engine = _build_engine(profiles_file, threshold)
    console.print(
        f"[yellow]Matching {len(engine)} profile(s) against "
        f"{requirements.id or requirements_file.name}[/yellow]"
    )

    results = engine.find_matches(requirements)[:top_n]

    if not results:
        console.print("[yellow]No profiles matched the threshold.[/yellow]")
        raise typer.Exit(0)

    table = Table(title=f"Top {len(results)} Matches")
    table.add_column("Rank", style="dim", width=4)
    table.add_column("Profile", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("Level", justify="center")
    table.add_column("Skills", justify="right")
    table.add_column("Interests", justify="right")
    table.add_column("Confidence", justify="right")

    for i, result in enumerate(results, 1):
        level = result.score_level.value
        color = _level_color(level)
        table.add_row(
            str(i),
            result.profile.user_name,
            str(result.match_score),
            f"[{color}]{level.upper()}[/{color}]",
            f"{len(result.matched_skills)}/{len(result.skill_matches)}",
            str(result.interest_alignment),
            str(result.confidence_score),
        )

    console.print(table)

    top = results[0]
    console.print(f"\n[bold]Why {top.profile.user_name}:[/bold]")
    for reason in top.recommendation_reasons:
        console.print(f"  • {reason}")
    if top.missing_skills:
        console.print(f"  [yellow]Missing:[/yellow] {', '.join(top.missing_skills)}")


@app.command()
def analytics(
    profiles_file: Optional[Path] = PROFILES_OPTION,
):
    """Show statistics about the profile pool."""
    engine = _build_engine(profiles_file)
    summary = engine.get_matching_analytics()

    console.print(f"Profiles: [cyan]{summary.total_profiles}[/cyan] "
                  f"([green]{summary.active_profiles}[/green] active)")
    console.print(f"Average skills per profile: [cyan]{summary.average_skills_per_profile:.1f}[/cyan]")
    console.print(f"Verification rate: [cyan]{summary.verification_rate:.0%}[/cyan]")

    if summary.top_skills:
        table = Table(title="Top Skills")
        table.add_column("Skill", style="cyan")
        table.add_column("Profiles", justify="right")
        for entry in summary.top_skills:
            table.add_row(entry.skill, str(entry.count))
        console.print(table)


@app.command()
def profiles(
    profiles_file: Optional[Path] = PROFILES_OPTION,
):
    """List profiles in the pool."""
    engine = _build_engine(profiles_file)

    if not len(engine):
        console.print("[yellow]No profiles found.[/yellow]")
        raise typer.Exit(0)

    table = Table(title="Profiles")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Skills")
    table.add_column("Availability")
    table.add_column("Location")
    table.add_column("Active", justify="center")

    for profile in engine.profiles:
        table.add_row(
            profile.id,
            profile.user_name,
            ", ".join(s.skill for s in profile.skills),
            profile.availability or "-",
            profile.location or "-",
            "✓" if profile.is_active else "✗",
        )

    console.print(table)


if __name__ == "__main__":
    app()
