"""Command: print the negation of a period."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from isoperiod.commands._base import PeriodCommand

if TYPE_CHECKING:
    from isoperiod.commands._context import AppContext


@click.command(
    cls=PeriodCommand,
    examples="""\
  isoperiod negate P3D
  isoperiod --quiet negate -- -PT1.5S""",
)
@click.argument("text")
@click.pass_obj
def negate(app: AppContext, text: str) -> None:
    """Negate a period: P3D becomes -P3D and back again."""
    app.emit(app.service.negate(text))
