"""
power_manager.py - Escritura del gobernador de CPU.

Escribe el gobernador en todos los archivos scaling_governor que existan.
Si no hay ninguno (sin cpufreq) no hace nada; si alguno no se puede escribir
el fallo es fatal y se aborta el cambio de perfil.
"""

from __future__ import annotations

from typing import Any, Dict

from pwr.model.capabilities import governor_paths
from pwr.model.errors import CpuGovernorWriteError


class PowerManager:
    """
    Gestiona el gobernador de CPU vía sysfs.
    """

    def __init__(self, governor_glob: str):
        self.governor_glob = governor_glob

    def set_governor(self, governor: str) -> Dict[str, Any]:
        """
        Establece `governor` en todos los CPUs.

        Returns:
            Dict con applied, message y paths (archivos escritos).

        Raises:
            CpuGovernorWriteError: si algún archivo no se puede abrir o escribir.
        """
        paths = governor_paths(self.governor_glob)
        if not paths:
            return {"applied": False, "message": "No cpufreq governor paths", "paths": []}

        for path in paths:
            _write_governor(path, governor)
        return {
            "applied": True,
            "message": f"Governor set to '{governor}' on {len(paths)} CPU(s)",
            "paths": paths,
        }


def _write_governor(path: str, governor: str) -> None:
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(f"{governor}\n")
    except OSError as exc:
        raise CpuGovernorWriteError(f"Could not write {path}: {exc}") from exc
