from __future__ import annotations
import json
import sys
import typer
from rich import print
from rich.markup import escape
from pydantic import ValidationError
from .analyzer import LessonPlanAnalyzer
from .config_loader import load_config
from .errors import AnalysisError
from .prompts import RESPONSE_SCHEMA
from .utils.logging import setup_logging

app = typer.Typer(
    no_args_is_help=True,
    help="Turn free lesson-plan text into a structured lesson plan using Gemini.",
)


def _load_config(path):
    try:
        return load_config(path)
    except ValidationError as e:
        print(f"[red]Invalid configuration:[/red] {escape(str(e))}")
        raise typer.Exit(1)


@app.command()
def analyze(
    file: str = typer.Option(None, "--file", "-f", help="Lesson text file (default: stdin)"),
    config: str = typer.Option(None, "--config", "-c"),
    output: str = typer.Option(None, "--output", "-o", help="Write JSON here instead of stdout"),
):
    """Analyze a lesson plan and print it as JSON."""
    if file:
        with open(file, "r", encoding="utf-8") as f:
            lesson_text = f.read()
    else:
        lesson_text = sys.stdin.read()
    if not lesson_text.strip():
        print("[red]No lesson text given.[/red]")
        raise typer.Exit(1)

    cfg = _load_config(config)
    setup_logging(level=cfg.logging.level)
    try:
        plan = LessonPlanAnalyzer(config=cfg).analyze(lesson_text)
    except AnalysisError as e:
        print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    out = json.dumps(plan.to_payload(), indent=2, ensure_ascii=False)
    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(out + "\n")
        print(f"[green]Saved lesson plan:[/green] {escape(output)}")
    else:
        typer.echo(out)


@app.command()
def health(config: str = typer.Option(None, "--config", "-c")):
    """Show which model and endpoint will be used and whether an API key is set. No network call."""
    cfg = _load_config(config)
    g = cfg.gemini
    print(f"[cyan]Model:[/cyan] {g.model}")
    print(f"[cyan]Endpoint:[/cyan] {g.endpoint}")
    if g.has_api_key():
        print("[green]API key: configured[/green]")
    else:
        print("[yellow]API key: missing[/yellow] (set GEMINI_API_KEY or API_KEY)")
        raise typer.Exit(1)


@app.command()
def schema():
    """Print the response schema sent to the generation service."""
    typer.echo(json.dumps(RESPONSE_SCHEMA, indent=2, ensure_ascii=False))
