"""Search a directory tree by file name or content, in parallel."""

__version__ = "0.1.0"
__all__ = ["__version__"]