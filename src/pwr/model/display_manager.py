"""
display_manager.py - Reinicio del display manager con systemctl.
"""

from __future__ import annotations

from typing import Any, Dict

from pwr.model.capabilities import binary_exists
from pwr.model.process_runner import ProcessRunner


class DisplayManager:
    def __init__(self, systemctl: str, runner: ProcessRunner):
        self.systemctl = systemctl
        self.runner = runner

    def restart(self, suppress: bool = False) -> Dict[str, Any]:
        """
        Reinicia display-manager salvo que `suppress` sea True (--norestart).
        """
        if suppress:
            return {"applied": False, "message": "Display manager restart suppressed"}
        if not binary_exists(self.systemctl):
            return {"applied": False, "message": "systemctl not available"}
        returncode = self.runner.run([self.systemctl, "restart", "display-manager"])
        return {
            "applied": True,
            "message": "display-manager restarted",
            "returncode": returncode,
        }
