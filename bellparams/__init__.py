"""Blocked-ELL block size search and array construction for sparse square matrices."""

__version__ = "0.1.0"
__all__ = ["blocked_ell", "cli", "utils"]