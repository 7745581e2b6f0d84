"""Command: validate several periods at once."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from isoperiod.commands._base import PeriodCommand

if TYPE_CHECKING:
    from isoperiod.commands._context import AppContext


@click.command(
    cls=PeriodCommand,
    examples="""\
  isoperiod check P1D PT12H P1Y6M
  isoperiod --quiet check P1D PT90M
  isoperiod --json check P1D PY""",
)
@click.argument("texts", nargs=-1, required=True)
@click.pass_obj
def check(app: AppContext, texts: tuple[str, ...]) -> None:
    """Check that every TEXT is a valid period; exit 1 if any is not."""
    app.emit(app.service.check(texts))
