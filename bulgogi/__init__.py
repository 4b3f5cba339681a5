"""bulgogi - build-description generator for multi-target source trees."""

from bulgogi.__version__ import __version__

__all__ = ["__version__"]
