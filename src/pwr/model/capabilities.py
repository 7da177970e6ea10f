"""
capabilities.py - Detección de los mecanismos de control disponibles.

Comprueba si existen los binarios auxiliares, los archivos de gobernador de CPU
y una interfaz inalámbrica. Nada se cachea: el hardware y las herramientas
instaladas pueden cambiar entre ejecuciones. La ausencia nunca es un error.
"""

from __future__ import annotations

import glob
import os
import stat
import sys
from typing import Any, Callable, Dict, List, Optional

import psutil

_EXEC_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def binary_exists(path: str) -> bool:
    """
    True si `path` es un archivo regular con algún bit de ejecución activo.
    """
    try:
        status = os.stat(path)
    except OSError:
        return False
    return stat.S_ISREG(status.st_mode) and bool(status.st_mode & _EXEC_BITS)


def governor_paths(pattern: str) -> List[str]:
    """
    Devuelve los archivos scaling_governor que coinciden con el patrón.
    """
    return sorted(glob.glob(pattern))


def wireless_interface_name(
    prefix: str = "wl",
    lister: Optional[Callable[[], Dict[str, Any]]] = None,
) -> Optional[str]:
    """
    Busca la primera interfaz de red cuyo nombre empieza por `prefix`.

    Args:
        prefix: Prefijo convencional de las interfaces inalámbricas.
        lister: Función que devuelve un dict nombre -> direcciones
            (por defecto psutil.net_if_addrs).

    Returns:
        El nombre de la interfaz, o None si no hay ninguna.
    """
    lister = lister or psutil.net_if_addrs
    try:
        interfaces = lister()
    except (OSError, psutil.Error) as exc:
        print(f"[Capabilities] Could not list network interfaces: {exc}", file=sys.stderr)
        return None
    for name in interfaces:
        if name.startswith(prefix):
            return name
    return None
