"""
controller - Módulo de Control de pwr

Este paquete contiene el Controlador en el patrón MVC:
- AppController: despacha la acción resuelta y produce el código de salida
"""

from .app_controller import AppController

__all__ = ['AppController']
