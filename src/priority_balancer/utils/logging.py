"""Logging setup and rich rendering of a balancer's layout."""

from __future__ import annotations

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from priority_balancer.core.balancer import LoadBalancer

console = Console()


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(name)s | %(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def render_groups(balancer: LoadBalancer[Any], max_items: int = 8) -> Table:
    """Table with one row per priority group."""
    table = Table(title="priority groups", border_style="red")
    table.add_column("Priority", justify="right")
    table.add_column("Items", justify="right")
    table.add_column("Total weight", justify="right")
    table.add_column("Weights")

    for group in balancer.groups:
        weights = [str(w) for w in group.weights[:max_items]]
        if len(group) > max_items:
            weights.append(f"… +{len(group) - max_items}")
        table.add_row(
            str(group.priority),
            str(len(group)),
            f"{group.total_weight:,}",
            ", ".join(weights),
        )

    return table
