"""Rich renderables summarising the contents of a storage."""

from __future__ import annotations

import io

from rich.console import Console
from rich.table import Table

from .storage import CerealStorageImpl


def _fill_percent(amount: float, capacity: float) -> str:
    if capacity <= 0:
        return "-"
    return f"{amount / capacity * 100:.0f}%"


def build_storage_table(storage: CerealStorageImpl) -> Table:
    """Tabulate every allocated container in insertion order."""

    table = Table(title="Cereal Storage", expand=False)
    table.add_column("Cereal", style="bold")
    table.add_column("Amount", justify="right")
    table.add_column("Free space", justify="right")
    table.add_column("Fill", justify="right")
    for cereal, amount in storage.containers.items():
        table.add_row(
            cereal.name,
            f"{amount:g}",
            f"{storage.container_capacity - amount:g}",
            _fill_percent(amount, storage.container_capacity),
        )
    table.caption = (
        f"{len(storage)} container(s) of {storage.container_capacity:g}, "
        f"{storage.free_slots} slot(s) free"
    )
    return table


def render_storage(storage: CerealStorageImpl, *, width: int = 80) -> str:
    """Render :func:`build_storage_table` as plain text."""

    console = Console(width=width, record=True, color_system=None, file=io.StringIO())
    console.print(build_storage_table(storage))
    return console.export_text()


__all__ = ["build_storage_table", "render_storage"]
