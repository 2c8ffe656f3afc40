"""Command-line interface for the NWS rounding engine."""

import click

from nws_rounding import __version__
from nws_rounding.config import DEFAULT_PIPELINE, get_city, list_cities
from nws_rounding.core import Pipeline, RoundingError, TemperatureUnit, UnreachableDisplayError
from nws_rounding.engine import (
    CalculatorSettings,
    calculate,
    find_range,
    get_printed_range,
    printed_for_range,
    simulate_asos,
    simulate_metar,
)
from nws_rounding.cli.display import RoundingDisplay
from nws_rounding.utils import setup_logging

PIPELINE_CHOICE = click.Choice([p.value for p in Pipeline], case_sensitive=False)


def _fail(error: Exception) -> None:
    click.echo(f"Error: {error}", err=True)
    raise SystemExit(1)


@click.group()
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """NWS Rounding - what a displayed temperature really means."""
    setup_logging(level="DEBUG" if debug else "INFO", rich_output=True)


@main.command()
@click.argument("value", type=float)
@click.option("--pipeline", "-p", type=PIPELINE_CHOICE, default=DEFAULT_PIPELINE,
              help="asos: VALUE in °F; metar: VALUE in °C")
def simulate(value: float, pipeline: str):
    """Trace a true reading through a reporting pipeline."""
    display = RoundingDisplay()
    try:
        if Pipeline.parse(pipeline) == Pipeline.METAR:
            display.show(display.generate_metar_panel(simulate_metar(value)))
        else:
            display.show(display.generate_asos_panel(simulate_asos(value)))
    except RoundingError as e:
        _fail(e)


@main.command(name="range")
@click.argument("value", type=int)
@click.option("--pipeline", "-p", type=PIPELINE_CHOICE, default=None,
              help="Observation type (default: the city's, else asos)")
@click.option("--unit", "-u", type=click.Choice(["f", "c"], case_sensitive=False), default="f",
              help="Unit of the displayed VALUE")
@click.option("--offset", "-o", type=int, default=0, help="Step the displayed value by N degrees")
@click.option("--city", "-c", default=None, help="City code (NYC, CHI, LAX, MIA, DEN, AUS, PHI)")
def range_(value: int, pipeline: str, unit: str, offset: int, city: str):
    """Show the true-temperature range behind a displayed value."""
    city_config = None
    if city:
        try:
            city_config = get_city(city)
        except KeyError as e:
            _fail(e)

    if pipeline is None:
        pipeline = city_config.observation_type if city_config else DEFAULT_PIPELINE

    settings = CalculatorSettings(
        mode=Pipeline.parse(pipeline),
        unit=TemperatureUnit.parse(unit),
        offset=offset,
    )
    try:
        result = calculate(value, settings)
    except RoundingError as e:
        _fail(e)

    display = RoundingDisplay()
    display.show(display.generate_result(result, city_config))


@main.command()
@click.argument("min_true", type=float)
@click.argument("max_true", type=float)
@click.option("--pipeline", "-p",
              type=click.Choice(["settlement"] + [p.value for p in Pipeline], case_sensitive=False),
              default="settlement",
              help="settlement: °F interval printed to whole °F; asos/metar: re-run that chain")
def printed(min_true: float, max_true: float, pipeline: str):
    """Show what an interval of true readings could print as."""
    chain = None if pipeline.lower() == "settlement" else Pipeline.parse(pipeline)
    try:
        dist = get_printed_range(min_true, max_true, chain)
    except RoundingError as e:
        _fail(e)

    display = RoundingDisplay()
    display.show(display.generate_distribution_panel(dist))


@main.command()
@click.option("--start", "-s", type=int, default=60, help="First displayed °F")
@click.option("--end", "-e", type=int, default=80, help="Last displayed °F")
@click.option("--pipeline", "-p", type=PIPELINE_CHOICE, default=DEFAULT_PIPELINE)
def table(start: int, end: int, pipeline: str):
    """Tabulate ranges for a span of displayed values."""
    if start > end:
        _fail(click.BadParameter("--start must not be above --end"))

    rows = []
    try:
        for displayed in range(start, end + 1):
            try:
                rng = find_range(displayed, pipeline)
            except UnreachableDisplayError:
                rows.append((displayed, None, None))
                continue
            rows.append((displayed, rng, printed_for_range(rng)))
    except RoundingError as e:
        _fail(e)

    display = RoundingDisplay()
    display.show(display.generate_range_table(Pipeline.parse(pipeline).name, rows))


@main.command()
def cities():
    """List available cities."""
    display = RoundingDisplay()
    display.show(display.generate_cities_table(get_city(code) for code in list_cities()))


if __name__ == "__main__":
    main()
