"""
process_runner.py - Ejecución síncrona de herramientas externas.

Un único punto para lanzar prime-select, iwconfig y systemctl: lanza el
proceso hijo, espera a que termine y devuelve su código de salida. Los tests
sustituyen esta clase por un runner falso con el mismo método run().
"""

from __future__ import annotations

import shlex
import subprocess
import sys
from typing import List

from pwr.model.errors import SpawnError


class ProcessRunner:
    """
    Lanza comandos externos y espera su finalización (sin timeout).
    """

    def run(self, argv: List[str]) -> int:
        """
        Ejecuta `argv` y devuelve el código de salida del proceso.

        Un código distinto de cero se informa por stderr pero no se considera
        fatal; no poder lanzar el proceso sí lo es.

        Raises:
            SpawnError: si el proceso no se pudo lanzar.
        """
        cmd_display = shlex.join(argv)
        try:
            result = subprocess.run(argv, check=False)
        except OSError as exc:
            raise SpawnError(f"Could not run '{cmd_display}': {exc}") from exc

        if result.returncode != 0:
            print(
                f"[ProcessRunner] '{cmd_display}' exited with status {result.returncode}",
                file=sys.stderr,
            )
        return result.returncode
