"""Cyclopts App definition for spec commands."""

from cyclopts import App

app = App(
    name="spec",
    help="Resolve, validate and describe cluster specs",
    help_on_error=True,
)
