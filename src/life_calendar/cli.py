"""CLI interface for life-calendar."""

import sys

import typer
from dotenv import load_dotenv
from rich.console import Console

from .config import Settings
from .errors import CalendarError, InvalidInput
from .logging_setup import configure_logging
from .models import SUPPORTED_MODES, CalendarRequest
from .output import resolve_output_provider, supported_output_formats
from .pipeline import render_calendar
from .themes import supported_theme_names
from .weeks import life_weeks, parse_date, year_weeks

# Load environment variables from .env file
load_dotenv()

console = Console()
err_console = Console(stderr=True)


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""
    pass


def main(
    mode: str = typer.Argument(
        "life",
        help=f"Calendar to draw ({', '.join(SUPPORTED_MODES)})",
    ),
    birth_date: str = typer.Option(
        None,
        "--birth-date",
        "-b",
        help="Birth date in YYYY-MM-DD format (life mode)",
    ),
    life_expectancy: int = typer.Option(
        None,
        "--life-expectancy",
        "-l",
        help="Expected lifespan in years, 1-150 (life mode)",
    ),
    theme: str = typer.Option(
        None,
        "--theme",
        "-t",
        help=f"Colour theme ({', '.join(supported_theme_names())})",
    ),
    reference_date: str = typer.Option(
        None,
        "--reference-date",
        "-r",
        help="Date treated as today, YYYY-MM-DD (defaults to today)",
    ),
    out: str = typer.Option(
        None,
        "--output",
        "-o",
        help=f"Output image path ({', '.join(supported_output_formats()).upper()})",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log debug details",
    ),
) -> None:
    """
    Render a life calendar (or this year's calendar) as a PNG image.

    Examples:
      # Your life in weeks
      life-calendar --birth-date 1990-05-15 --output life.png

      # This year in weeks, light theme
      life-calendar year --theme light --output year.png
    """
    try:
        settings = Settings.from_env()
        configure_logging("DEBUG" if verbose else settings.log_level, settings.log_format)

        request = CalendarRequest(
            mode=mode,
            birth_date=birth_date,
            life_expectancy=life_expectancy,
            theme_name=theme,
            reference_date=reference_date,
        )
        if not out:
            out = f"{mode}-calendar.png"

        _generate_output(request, out, settings)

    except (CLIError, InvalidInput) as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)

    except Exception as e:
        err_console.print(f"[bold red]Unexpected error:[/bold red] {e}")
        sys.exit(1)


def _generate_output(request: CalendarRequest, output_path: str, settings: Settings) -> None:
    """Render the calendar and write it to ``output_path``."""
    try:
        provider = resolve_output_provider(output_path)
    except ValueError as e:
        raise CLIError(str(e))

    console.print(f"[bold blue]Generating {request.mode} calendar...[/bold blue]")
    try:
        result = render_calendar(request, settings)
    except InvalidInput:
        raise
    except CalendarError as e:
        raise CLIError(f"Failed to generate output: {e}")

    _display_stats(request, settings)

    console.print(f"[bold blue]Saving to {output_path}...[/bold blue]")
    try:
        provider.write(result.data)
    except OSError as e:
        raise CLIError(f"Failed to save file '{output_path}': {e}")
    console.print(f"[green]✓[/green] PNG ({result.length:,} bytes) saved to {output_path}")


def _display_stats(request: CalendarRequest, settings: Settings) -> None:
    reference = None
    if request.reference_date:
        reference = parse_date(request.reference_date, "referenceDate")
    if request.mode == "year":
        elapsed, total = year_weeks(reference)
        console.print(f"Week [bold]{elapsed + 1}[/bold] of {total}")
        return
    expectancy = request.life_expectancy or settings.default_life_expectancy
    elapsed, total = life_weeks(request.birth_date, reference, expectancy)
    console.print(
        f"[bold]{elapsed:,}[/bold] weeks lived, {total - elapsed:,} of {total:,} to go"
    )


app = typer.Typer()
app.command()(main)

if __name__ == "__main__":
    app()
