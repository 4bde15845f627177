# pyright: reportUnusedCallResult=false, reportUnusedFunction=false
"""Spec command app for resolving and validating cluster specs."""

# Import command modules to register commands with the app
from . import _defaults as _defaults, _schema as _schema, _validate as _validate
from ._app import app

__all__ = ["app"]
