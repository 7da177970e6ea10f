"""
wireless_manager.py - Ahorro de energía de la tarjeta inalámbrica.

Usa iwconfig sobre la primera interfaz "wl*". La interfaz se busca en cada
llamada porque puede aparecer o desaparecer (p. ej. un adaptador USB).
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional

from pwr.model.capabilities import binary_exists, wireless_interface_name
from pwr.model.process_runner import ProcessRunner


class WirelessManager:
    """
    Ajusta `iwconfig <iface> power on|off`.
    """

    def __init__(
        self,
        iwconfig: str,
        runner: ProcessRunner,
        prefix: str = "wl",
        interface_lister: Optional[Callable[[], Dict[str, Any]]] = None,
    ):
        self.iwconfig = iwconfig
        self.runner = runner
        self.prefix = prefix
        self._interface_lister = interface_lister

    def set_power(self, state: str) -> Dict[str, Any]:
        iface = wireless_interface_name(self.prefix, self._interface_lister)
        if not binary_exists(self.iwconfig) or iface is None:
            return {"applied": False, "message": "iwconfig or wireless interface not available"}
        returncode = self.runner.run([self.iwconfig, iface, "power", state])
        return {
            "applied": True,
            "message": f"{iface} power {state}",
            "interface": iface,
            "returncode": returncode,
        }
