# Command-line interface

from .compressible import main

__all__ = ["main"]
