"""
model - Acceso al sistema

Este paquete contiene las clases del Modelo en el patrón MVC:
- PowerManager, GPUManager, WirelessManager, DisplayManager: mutadores del sistema
- ProfileStateStore: persistencia del perfil actual
- PrivilegedSection: elevación temporal de privilegios
"""

from .display_manager import DisplayManager
from .gpu_manager import GPUManager
from .power_manager import PowerManager
from .privilege import PrivilegedSection
from .process_runner import ProcessRunner
from .profile import Action, Profile, RunConfig
from .state_store import ProfileStateStore
from .wireless_manager import WirelessManager

__all__ = [
    'Action',
    'DisplayManager',
    'GPUManager',
    'PowerManager',
    'PrivilegedSection',
    'ProcessRunner',
    'Profile',
    'ProfileStateStore',
    'RunConfig',
    'WirelessManager',
]
