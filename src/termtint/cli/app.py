"""Typer CLI application for inspecting color capability and rendering."""

import logging
import os
from pathlib import Path
from typing import Annotated, Optional

try:
    import typer
    from rich.console import Console
    from rich.markup import escape
    from rich.table import Table
    HAS_TYPER = True
except ImportError:
    HAS_TYPER = False

from termtint.control.capability import (
    COLOR_ENV_VARS,
    ColorTier,
    Override,
    get_resolver,
)
from termtint.core.color import Color
from termtint.core.constants import RESET
from termtint.render.sgr import sgr

TIER_NAMES = {
    "none": ColorTier.NONE,
    "16": ColorTier.ANSI_16,
    "256": ColorTier.ANSI_256,
    "truecolor": ColorTier.TRUE_COLOR,
}


def _swatch(color: Color, tier: ColorTier, label: str = "  ") -> str:
    """A background swatch for the color as it appears on a tier."""
    if tier == ColorTier.NONE:
        return label
    return f"{sgr(color.degrade(tier).to_sgr_bg())}{label}{RESET}"


def _parse_tier(value: str) -> ColorTier:
    try:
        return TIER_NAMES[value.strip().lower()]
    except KeyError:
        raise typer.BadParameter(f"expected one of: {', '.join(TIER_NAMES)}") from None


def create_app() -> "typer.Typer":
    """Create and configure the CLI application."""
    if not HAS_TYPER:
        raise ImportError("typer and rich are required for CLI. Install with: pip install termtint[cli]")

    app = typer.Typer(
        name="termtint",
        help="Inspect terminal color support and render colors for it.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    state: dict[str, Console] = {}

    @app.callback()
    def main(
        color: Annotated[str, typer.Option("--color", help="Color output: auto, always or never")] = "auto",
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log detection details")] = False,
    ) -> None:
        """Capability-aware terminal colors."""
        if verbose:
            logging.basicConfig(level=logging.DEBUG, format="[%(name)s] %(levelname)s %(message)s")
        try:
            override = Override.parse(color)
        except ValueError as e:
            raise typer.BadParameter(str(e), param_hint="--color") from None
        resolver = get_resolver()
        resolver.set_override(override)
        state["console"] = Console(no_color=not resolver.should_colorize())

    @app.command()
    def detect() -> None:
        """Show the detected and resolved color tier."""
        console = state["console"]
        resolver = get_resolver()

        table = Table(title="Color capability", show_header=False)
        table.add_column("Setting", style="bold")
        table.add_column("Value")
        table.add_row("Detected tier", resolver.detected_tier().name)
        table.add_row("Override", resolver.override.value)
        table.add_row("Resolved tier", resolver.current_tier().name)
        table.add_row("Virtual terminal", "yes" if resolver.virtual_terminal_enabled() else "no")
        for name in COLOR_ENV_VARS:
            value = os.environ.get(name)
            table.add_row(name, "(unset)" if value is None else repr(value))
        console.print(table)

    @app.command()
    def show(
        colors: Annotated[list[str], typer.Argument(help="Color names, 256-color indices or #hex values")],
    ) -> None:
        """Show how colors render on every tier."""
        console = state["console"]
        resolver = get_resolver()
        active = resolver.current_tier()

        for text in colors:
            color = Color.parse(text)
            table = Table(title=f"{escape(text)} ({color.mode.value})")
            table.add_column("Tier", style="bold")
            table.add_column("Foreground")
            table.add_column("Background")
            for tier in ColorTier:
                degraded = color.degrade(tier)
                marker = " *" if tier == active else ""
                table.add_row(f"{tier.name}{marker}", degraded.to_sgr_fg(), degraded.to_sgr_bg())
            console.print(table)
            print(f"sample: {_swatch(color, active, ' ' + text + ' ')}")

    @app.command()
    def palette(
        tier: Annotated[Optional[str], typer.Option("--tier", "-t", help="Render for this tier: none, 16, 256, truecolor")] = None,
    ) -> None:
        """Print the 16 named colors and the 256-color palette as swatches."""
        console = state["console"]
        target = _parse_tier(tier) if tier else get_resolver().current_tier()
        console.print(f"[bold]Palette at tier {target.name}[/]")

        print("".join(_swatch(Color.named(i), target) for i in range(16)))
        print()
        # 6x6x6 cube, one row per green level and red blocks side by side
        for green in range(6):
            row = []
            for red in range(6):
                for blue in range(6):
                    index = 16 + red * 36 + green * 6 + blue
                    row.append(_swatch(Color.from_256(index), target))
                row.append(" ")
            print("".join(row))
        print()
        print("".join(_swatch(Color.from_256(i), target) for i in range(232, 256)))

    @app.command()
    def image(
        path: Annotated[Path, typer.Argument(help="Image file to render")],
        width: Annotated[int, typer.Option("--width", "-w", min=1, help="Width in characters")] = 78,
    ) -> None:
        """Render an image at the active color tier."""
        from termtint.render.image import render_image

        console = state["console"]
        try:
            art = render_image(path, width)
        except ImportError as e:
            console.print(f"[red]{escape(str(e))}[/]")
            raise typer.Exit(1)
        except OSError as e:
            console.print(f"[red]Cannot open {escape(str(path))}: {escape(str(e))}[/]")
            raise typer.Exit(1)
        print(art, end="")

    return app
