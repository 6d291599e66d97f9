"""igweather command-line interface.

This module provides the command-line interface for looking up the
weather of a location and for creating and checking settings files.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Final

import typer
import yaml
from pydantic import ValidationError

from igweather.settings import ClientSettings
from igweather.weather import WeatherAPI, WeatherResult

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="iGoogle XML weather client", add_completion=False)
config_app = typer.Typer(help="Config helpers")
app.add_typer(config_app, name="config")

logger: Final = logging.getLogger(__name__)  # Will be "igweather.cli"

LOCATION_ARGUMENT = typer.Argument(..., help="Zip code, city name or coordinates")
CONFIG_OPTION = typer.Option(None, "--config", "-c", exists=True, dir_okay=False)
DEGREE_OPTION = typer.Option(None, "--degree", "-d", help="Output unit: c or f")
LANGUAGE_OPTION = typer.Option(None, "--language", "-l", help="Language code, e.g. en")
JSON_OPTION = typer.Option(False, "--json", help="Print the result as JSON")
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
DST_ARGUMENT = typer.Argument(..., help="Output config.yaml")


def _format_result(result: WeatherResult, unit: str) -> str:
    symbol = f"°{unit.upper()}"
    current = result.current
    lines = [
        f"{result.info.city or 'Unknown location'} ({result.info.zip or '-'})",
        f"Now: {current.condition}, {current.temperature}{symbol}",
        f"     {current.humidity} | {current.wind_condition}",
    ]
    for day in result.days:
        forecast = result.forecast[day]
        lines.append(
            f"{day:<4} {forecast.low}{symbol} / {forecast.high}{symbol}  {forecast.condition}"
        )
    return "\n".join(lines)


@app.command()
def weather(
    location: str = LOCATION_ARGUMENT,
    config: Path | None = CONFIG_OPTION,
    degree: str | None = DEGREE_OPTION,
    language: str | None = LANGUAGE_OPTION,
    as_json: bool = JSON_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Show current conditions and the forecast for LOCATION."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    try:
        settings = ClientSettings.load(config)
    except FileNotFoundError:
        logger.debug("No config file found, using default settings")
        settings = ClientSettings()
    except RuntimeError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc

    client = WeatherAPI(settings)
    if degree is not None:
        client.set_degree_unit(degree)
    if language is not None:
        client.set_language(language)

    outcome = client.get_weather(location)
    if not outcome:
        typer.secho(f"No weather data available: {outcome.error}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    result = outcome.unwrap()
    if as_json:
        typer.echo(result.model_dump_json(indent=2))
    else:
        typer.echo(_format_result(result, client.settings.degree_unit.value))


# ───────────────────────── config sub-commands ───────────────────────────────
@config_app.command("validate")
def validate_config(file: Path):
    """Validate a YAML config file against the schema."""
    try:
        ClientSettings.load(file)
        typer.echo("✅ Config valid")
    except RuntimeError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


@config_app.command("wizard")
def wizard(dst: Path = DST_ARGUMENT):
    """Interactive prompt to create a config file."""
    typer.echo("Interactive config builder - press Enter for defaults.")

    while True:
        data: dict[str, Any] = {
            "degree_unit": typer.prompt("Degree unit [c|f]", default="f"),
            "language": typer.prompt("Language", default="en"),
            "timeout": typer.prompt("Timeout (seconds)", default="10"),
        }
        try:
            cfg = ClientSettings(**data)
            break  # valid → exit loop
        except ValidationError as err:
            typer.secho("\nConfig error(s):", fg=typer.colors.RED, err=True)
            for e in err.errors():
                typer.secho(f"  • {e['loc'][0]} - {e['msg']}", fg=typer.colors.RED, err=True)
            typer.echo("Please re-enter the values.\n")

    dst.write_text(yaml.safe_dump(cfg.model_dump(mode="json"), sort_keys=False), encoding="utf-8")
    typer.secho(f"Config written to {dst}", fg=typer.colors.GREEN)


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
