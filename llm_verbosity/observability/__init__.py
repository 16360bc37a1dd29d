"""Observability helpers."""

from .logging import ComponentLogger

__all__ = ["ComponentLogger"]
