"""
config.py - Configuración de pwr.

Agrupa las rutas de control del sistema (sysfs, binarios auxiliares, archivo de
estado) y los valores que aplica cada perfil. No se lee ningún archivo: los
valores por defecto se pueden sobrescribir desde código (por ejemplo en tests)
pasando un diccionario a load_config().
"""

from __future__ import annotations

import copy
from typing import Any, Dict, Optional

VERSION_MAJOR = 1
VERSION_MINOR = 1
VERSION = f"{VERSION_MAJOR}.{VERSION_MINOR}"

DEFAULT_CONFIG: Dict[str, Any] = {
    "paths": {
        "governor_glob": "/sys/devices/system/cpu/cpu*/cpufreq/scaling_governor",
        "prime_select": "/usr/bin/prime-select",
        "iwconfig": "/sbin/iwconfig",
        "systemctl": "/bin/systemctl",
        "state_file": "/var/lib/pwr_state",
    },
    "wireless_prefix": "wl",
    "profiles": {
        "perform": {"governor": "performance", "gpu": "nvidia", "wireless_power": "on"},
        "powersave": {"governor": "powersave", "gpu": "intel", "wireless_power": "off"},
    },
}


def load_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Devuelve una copia de DEFAULT_CONFIG fusionada con `overrides`.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if overrides:
        _deep_update(config, overrides)
    return config


def _deep_update(target: Dict[str, Any], source: Dict[str, Any]) -> None:
    """Actualiza recursivamente un diccionario destino con valores de otro."""
    for key, value in source.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            _deep_update(target[key], value)
        else:
            target[key] = value
