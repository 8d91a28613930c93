"""Neo Admin API - organisation and user administration service."""

from .__version__ import __version__

__all__ = ["__version__"]
