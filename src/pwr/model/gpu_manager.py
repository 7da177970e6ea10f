"""
gpu_manager.py - Selección de GPU con prime-select.

Best-effort: si prime-select no está instalado no se hace nada.
"""

from __future__ import annotations

from typing import Any, Dict

from pwr.model.capabilities import binary_exists
from pwr.model.process_runner import ProcessRunner


class GPUManager:
    """
    Cambia la GPU activa (nvidia / intel) usando prime-select.
    """

    def __init__(self, prime_select: str, runner: ProcessRunner):
        self.prime_select = prime_select
        self.runner = runner

    def is_available(self) -> bool:
        return binary_exists(self.prime_select)

    def select(self, vendor: str) -> Dict[str, Any]:
        if not self.is_available():
            return {"applied": False, "message": "prime-select not available"}
        returncode = self.runner.run([self.prime_select, vendor])
        return {
            "applied": True,
            "message": f"prime-select {vendor}",
            "returncode": returncode,
        }
