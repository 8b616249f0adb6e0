"""Typed solver options, sparse coordinate-list matrices and optimization test problems."""

__version__ = "0.1.0"
__all__ = ["matrix", "option", "options", "problems"]