"""
pwr - Cambia un portátil Linux entre los modos de rendimiento y ahorro de energía.
"""

from pwr.config import VERSION as __version__

__all__ = ['__version__']
