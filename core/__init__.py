"""Application support shared by telebind users: structured logging.

This package is framework-agnostic. It must NEVER import from ``telebind/``.
"""

from core.logger import TelebindLogger

__all__ = [
    "TelebindLogger",
]
