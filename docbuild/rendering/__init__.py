"""Template rendering with explicit-context partial inclusion."""

from .engine import create_environment, render

__all__ = ["create_environment", "render"]
