"""Flask frontend for the KWIC engine."""
from __future__ import annotations
from .web import app, main

__all__ = ["app", "main"]
