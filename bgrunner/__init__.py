"""Start commands in the background and manage them from the command line."""

__version__ = "1.0.0"
__all__ = ["__version__"]