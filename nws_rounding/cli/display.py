"""
Terminal rendering for the NWS rounding engine.

Uses Rich to display step traces, uncertainty ranges and "could print as"
probability bars.
"""

from typing import Iterable, List, Optional, Tuple

from rich import box
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from nws_rounding.config import CityConfig
from nws_rounding.core import (
    ASOSSteps,
    METARSteps,
    PrintedDistribution,
    TemperatureUnit,
    UncertaintyRange,
)
from nws_rounding.engine.calculator import CalculatorResult
from nws_rounding.utils.numeric import format_range

BAR_WIDTH = 30


class RoundingDisplay:
    """
    Renders engine results as Rich panels and tables.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def show(self, renderable) -> None:
        self.console.print(renderable)

    # -------------------------------------------------------------------------
    # Step traces
    # -------------------------------------------------------------------------

    def _steps_table(self, rows: List[Tuple[str, str, Optional[str]]]) -> Table:
        table = Table(box=box.SIMPLE, expand=False)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Step")
        table.add_column("Value", justify="right")
        for i, (label, value, style) in enumerate(rows, start=1):
            table.add_row(str(i), label, value, style=style)
        return table

    def generate_asos_panel(self, steps: ASOSSteps) -> Panel:
        """Five-step ASOS trace."""
        table = self._steps_table([
            ("Round to whole °F", f"{steps.rounded_f}°F", None),
            ("Convert to °C", f"{steps.celsius_exact:.2f}°C", "dim"),
            ("Round to whole °C", f"{steps.rounded_c}°C", None),
            ("Convert back to °F", f"{steps.fahrenheit_exact:.1f}°F", "dim"),
            ("Round to whole °F", f"{steps.displayed_f}°F", "bold green"),
        ])
        return Panel(
            table,
            title=f"ASOS: {steps.original:g}°F displays as {steps.displayed_f}°F",
            border_style="yellow",
        )

    def generate_metar_panel(self, steps: METARSteps) -> Panel:
        """Three-step METAR trace."""
        table = self._steps_table([
            ("Round to whole °C", f"{steps.rounded_c}°C", None),
            ("Convert to °F", f"{steps.fahrenheit_exact:.1f}°F", "dim"),
            ("Round to whole °F", f"{steps.displayed_f}°F", "bold green"),
        ])
        return Panel(
            table,
            title=f"METAR: {steps.original:g}°C displays as {steps.displayed_f}°F",
            border_style="blue",
        )

    # -------------------------------------------------------------------------
    # Ranges and printed outcomes
    # -------------------------------------------------------------------------

    def generate_distribution_panel(self, dist: PrintedDistribution) -> Panel:
        """Probability bars for each value the range can print as."""
        color = "yellow" if dist.is_split else "green"
        table = Table.grid(padding=(0, 1))
        table.add_column(justify="right")
        table.add_column()
        table.add_column(justify="right")

        for outcome in dist.outcomes:
            filled = round(BAR_WIDTH * outcome.probability_percent / 100)
            bar = Text("█" * filled, style=color)
            bar.append("░" * (BAR_WIDTH - filled), style="dim")
            table.add_row(
                f"[b]{outcome.value}°F[/b]",
                bar,
                f"{outcome.probability_percent}%",
            )

        title = "Could Print As"
        if dist.is_split:
            title += f" ({dist.outcome_count} outcomes)"
        parts = [table]
        if dist.is_split:
            parts.append(Text("Assumes uniform distribution within true range", style="dim"))
        return Panel(Group(*parts), title=title, border_style=color)

    def generate_range_panel(self, rng: UncertaintyRange, city: Optional[CityConfig] = None) -> Panel:
        """True-range summary."""
        grid = Table.grid(expand=True)
        grid.add_column()
        grid.add_column(justify="right")

        if city:
            grid.add_row("Station:", f"{city.station_id} ({city.name})")
        source = rng.pipeline.name if rng.pipeline else "Celsius"
        grid.add_row("Data Type:", source)
        grid.add_row("Displayed:", f"[b]{rng.displayed_value}°{rng.displayed_unit.value}[/b]")
        if rng.true_unit == TemperatureUnit.CELSIUS:
            grid.add_row("True Range (°C):", format_range(rng.min_c, rng.max_c))
        grid.add_row("True Range (°F):", format_range(rng.min_f, rng.max_f))
        grid.add_row("Uncertainty:", f"±{rng.uncertainty_f:.1f}°F")
        if rng.is_ambiguous:
            values = ", ".join(f"{c}°C" for c in rng.intermediate_values)
            grid.add_row("[red]Intermediates:[/red]", f"[red]{values}[/red]")
        elif rng.intermediate_value is not None:
            grid.add_row("Intermediate:", f"{rng.intermediate_value}°C")

        return Panel(grid, title="Actual Temperature Range", border_style="cyan")

    def generate_calculation_panel(self, result: CalculatorResult) -> Panel:
        """How the range was derived."""
        text = Text("\n".join(f"• {line}" for line in result.explanation()))
        mode = result.range.pipeline.name if result.range.pipeline else "CELSIUS"
        return Panel(text, title=f"How this was calculated ({mode})", border_style="white")

    def generate_result(self, result: CalculatorResult, city: Optional[CityConfig] = None) -> Group:
        return Group(
            self.generate_range_panel(result.range, city),
            self.generate_distribution_panel(result.distribution),
            self.generate_calculation_panel(result),
        )

    # -------------------------------------------------------------------------
    # Tables
    # -------------------------------------------------------------------------

    def generate_range_table(
        self,
        pipeline_name: str,
        rows: Iterable[Tuple[int, Optional[UncertaintyRange], Optional[PrintedDistribution]]],
    ) -> Table:
        """One row per displayed value; None marks a value never displayed."""
        table = Table(title=f"{pipeline_name} ranges", box=box.SIMPLE)
        table.add_column("Display", justify="right")
        table.add_column("Via", justify="right")
        table.add_column("True Range (°F)")
        table.add_column("±°F", justify="right")
        table.add_column("Prints As")

        for displayed, rng, dist in rows:
            if rng is None:
                table.add_row(f"{displayed}°F", "-", "never displayed", "-", "-", style="dim")
                continue
            via = ",".join(str(c) for c in rng.intermediate_values)
            prints = " / ".join(f"{o.value}° {o.probability_percent}%" for o in dist.outcomes)
            table.add_row(
                f"{displayed}°F",
                f"{via}°C",
                format_range(rng.min_f, rng.max_f),
                f"{rng.uncertainty_f:.1f}",
                prints,
                style="yellow" if dist.is_split else None,
            )
        return table

    def generate_cities_table(self, cities: Iterable[CityConfig]) -> Table:
        table = Table(title="Available Cities", box=box.SIMPLE)
        table.add_column("Code")
        table.add_column("City")
        table.add_column("Station")
        table.add_column("Type")
        for city in cities:
            table.add_row(city.code, city.name, city.station_id, city.observation_type.upper())
        return table
