"""Docbuild - static builder for templated Markdown documentation.

Renders Jinja2 partial inclusions in source documents and publishes them,
together with static assets, into a clean output directory.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Re-export main CLI entry point
from .cli import main

__all__ = ["main"]
