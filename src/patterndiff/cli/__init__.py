"""
Command-line interface (``patterndiff``).
"""

from patterndiff.cli.app import app

__all__ = ["app"]
