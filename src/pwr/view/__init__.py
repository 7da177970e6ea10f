"""
view - Vista de consola de pwr.
"""

from . import console

__all__ = ['console']
