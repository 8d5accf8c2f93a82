"""CLI interface for codescore."""

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from codescore.consts import UNAVAILABLE
from codescore.errors import ConfigError, ReportWriteError
from codescore.models.model_config import BlendMode
from codescore.models.model_report import ScoreReport
from codescore.pipeline import load_last_report, run_scoring_pipeline
from codescore.readers.config_loader import find_config, load_config
from codescore.scoring.composite import analyze_weights

app = typer.Typer(
    name="codescore",
    help="codescore - Composite code-quality score from static-analysis artifacts",
)

console = Console()


def _get_score_color(score: float) -> str:
    """Get color for score display."""
    if score >= 70:
        return "green"
    elif score >= 50:
        return "yellow"
    else:
        return "red"


def _format_norm(value: float) -> str:
    """Format a norm for display."""
    if value == UNAVAILABLE:
        return "[dim]n/a[/dim]"
    if isinstance(value, float) and not value.is_integer():
        text = f"{value:.1f}"
    else:
        text = f"{value:.0f}"
    return f"[{_get_score_color(value)}]{text}[/{_get_score_color(value)}]"


def _print_report(report: ScoreReport) -> None:
    """Print norms, weights and composite as tables."""
    table = Table(title="Norms")
    table.add_column("Dimension", style="cyan")
    table.add_column("Norm", justify="right")
    table.add_column("Weight", justify="right", style="magenta")

    for key in sorted(report.norms):
        weight = report.weights.get(key)
        weight_str = f"{weight:g}" if weight is not None else ""
        table.add_row(key, _format_norm(report.norms[key]), weight_str)

    # Weighted keys with no norm contribute 0
    for key in sorted(set(report.weights) - set(report.norms)):
        table.add_row(key, "[dim]missing[/dim]", f"{report.weights[key]:g}")

    console.print(table)

    score_color = _get_score_color(report.score)
    console.print(f"\nComposite Score: [bold {score_color}]{report.score}[/bold {score_color}]")

    analysis = analyze_weights(report.weights)
    if not analysis.sums_to_100:
        console.print(
            f"[yellow]Weights sum to {analysis.total:g}, not 100; "
            f"the composite is not on a 0-100 scale.[/yellow]"
        )


@app.command()
def run(
    root: Path = typer.Option(Path("."), "--root", "-r", help="Project root with tool artifacts"),
    output_dir: Path = typer.Option(
        None, "--output-dir", "-o", help="Where to write artifacts (defaults to --root)"
    ),
    config_path: Path = typer.Option(None, "--config", "-c", help="Scoring config JSON file"),
    blend_mode: BlendMode = typer.Option(
        None, "--blend-mode", help="How platform norms merge into local ones"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress"),
) -> None:
    """Score the project from its static-analysis artifacts."""
    # Configure logging
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        config = load_config(find_config(root, config_path))
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if blend_mode is not None:
        config = config.model_copy(update={"blend_mode": blend_mode})

    try:
        report, written = run_scoring_pipeline(
            root_dir=root,
            output_dir=output_dir,
            config=config,
        )
    except ReportWriteError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if not report.sources:
        console.print("[yellow]No input artifacts found; using default norms.[/yellow]\n")

    _print_report(report)

    console.print()
    for name, path in written.items():
        console.print(f"[dim]Wrote {name}: {path}[/dim]")


@app.command()
def show(
    output_dir: Path = typer.Option(
        Path("."), "--output-dir", "-o", help="Directory holding score_report.json"
    ),
) -> None:
    """Show the report written by the last run."""
    report = load_last_report(output_dir)
    if report is None:
        console.print("[yellow]No report found. Run 'codescore run' first.[/yellow]")
        raise typer.Exit(1)

    console.print(f"[dim]Scored at {report.timestamp.isoformat()}[/dim]\n")
    _print_report(report)


if __name__ == "__main__":
    app()
