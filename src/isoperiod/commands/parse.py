"""Command: parse a period and show its components."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from isoperiod.commands._base import PeriodCommand

if TYPE_CHECKING:
    from isoperiod.commands._context import AppContext


@click.command(
    cls=PeriodCommand,
    examples="""\
  isoperiod parse P1Y2M3DT4H5M6.7S
  isoperiod parse P24M
  isoperiod parse P24M --raw
  isoperiod --json parse -- -P1W""",
)
@click.argument("text")
@click.option("--raw", is_flag=True, help="Skip normalisation (keep 24 months as 24 months).")
@click.pass_obj
def parse(app: AppContext, text: str, raw: bool) -> None:
    """Parse an ISO-8601 period such as P1Y2M3D."""
    app.emit(app.service.parse(text, normalise=False if raw else None))
