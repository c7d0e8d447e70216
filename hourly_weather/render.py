from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .compass import cardinal

console = Console()


def _summary_lines(place, forecast, now=None):
    cur = forecast.current
    coord = place.coordinate
    lines = [
        f"Location: {place.label}",
        f"Latitude: {coord.latitude}  Longitude: {coord.longitude}",
        f"Current temperature: {cur.temperature:.1f}°C",
        f"Wind: {cur.wind_speed:.1f} km/h, direction: {cardinal(cur.wind_direction)}",
        f"Time: {cur.observation_time}" + (f" ({forecast.timezone})" if forecast.timezone else ""),
    ]
    if now is not None:
        lines.append(f"Now: {now:%H:%M}")
    return lines


def print_banner(out):
    out.print("=" * 48)
    out.print(" Hourly Weather — Open-Meteo forecast")
    out.print("=" * 48)


# ---------- text ----------
def render_text(place, forecast, rows, hours, now=None, out=None):
    out = out or console
    print_banner(out)
    for line in _summary_lines(place, forecast, now):
        out.print(line, markup=False, highlight=False)
    out.print("-" * 48)
    out.print(f"Next {hours}h:", highlight=False)
    if not rows:
        out.print("No upcoming hours in this forecast.", style="dim")
    for row in rows:
        out.print(f"{row.clock_time}  {row.temperature:5.1f}°C  {row.wind_label}", highlight=False)
    out.print("=" * 48)


# ---------- table ----------
def build_table(rows):
    t = Table(title="Hourly forecast", show_lines=True)
    t.add_column("Time", style="bold")
    t.add_column("Temp (°C)", justify="right")
    t.add_column("Wind")
    for row in rows:
        t.add_row(row.clock_time, f"{row.temperature:.1f}", row.wind_label)
    return t


def render_table(place, forecast, rows, now=None, out=None, stream=None):
    """Full-screen table; blocks until Enter, and always restores the terminal."""
    out = out or console
    head = Text(f"{place.label}  ", style="bold cyan") + Text(
        "\n".join(_summary_lines(place, forecast, now)[1:]), style="dim"
    )
    body = build_table(rows) if rows else Text("No upcoming hours in this forecast.", style="dim")
    with out.screen():
        out.print(Group(Panel(head, style="white on #071725"), body))
        try:
            out.input("\n[dim]Press Enter to quit[/dim] ", stream=stream)
        except EOFError:
            pass
