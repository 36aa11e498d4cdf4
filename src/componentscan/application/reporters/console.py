"""Console reporter: ResolutionResult -> rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from componentscan.domain.model import Component, ResolutionResult


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        show_lazy: Include lazy records in the table.
        show_paths: Show short path and chunk name columns.
        width: Console width in characters.
    """

    show_lazy: bool = False
    show_paths: bool = True
    width: int = 120

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 40:
            raise ValueError(f"width must be >= 40, got {self.width}")


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, result: ResolutionResult) -> str:
        """Format resolution result as rich formatted string."""
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=True,
            width=self._config.width,
            highlight=False,
        )

        console.print()
        console.rule("[bold]COMPONENTS[/bold]")
        console.print()
        console.print(
            f"[bold]Components:[/bold] {len(result.eager)} "
            f"([bold]records:[/bold] {len(result.components)}, "
            f"[bold]collisions:[/bold] {len(result.collisions)})"
        )
        console.print()

        rows = result.components if self._config.show_lazy else result.eager
        if rows:
            console.print(self._build_table(rows))
            console.print()

        if result.collisions:
            self._render_collisions(console, result)

        return output.getvalue()

    def _build_table(self, components: tuple[Component, ...]) -> Table:
        table = Table(show_header=True, header_style="bold")
        table.add_column("Name", style="cyan")
        table.add_column("Tag")
        if self._config.show_paths:
            table.add_column("Path", style="dim")
            table.add_column("Chunk", style="dim")
        table.add_column("Flags")

        for component in components:
            flags = []
            if component.async_:
                flags.append("async")
            if component.global_:
                flags.append("global")
            cells = [escape(component.pascal_name), escape(component.kebab_name)]
            if self._config.show_paths:
                cells += [escape(component.short_path), escape(component.chunk_name)]
            cells.append(", ".join(flags))
            table.add_row(*cells)

        return table

    def _render_collisions(self, console: Console, result: ResolutionResult) -> None:
        console.print(f"[bold red]NAME COLLISIONS[/bold red] ({len(result.collisions)})")
        console.print()

        for collision in result.collisions:
            console.print(f"  [yellow]{escape(collision.name)}[/yellow]")
            console.print(f"    kept     {escape(collision.kept_path)}")
            console.print(f"    dropped  {escape(collision.rejected_path)}")

        console.print()
