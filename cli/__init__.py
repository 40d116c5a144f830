"""Command line interface for the ambient display controller."""

from importlib import import_module
from types import ModuleType


def __getattr__(name: str) -> ModuleType:
    if name == "app":
        return import_module("cli.app")
    raise AttributeError(name)

# ``cli.app`` resolves to the module rather than the Typer instance so that
# tests can patch collaborators such as ``cli.app.build_default_controller``.

__all__ = []
