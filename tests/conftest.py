from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest

from pwr.config import load_config
from pwr.controller.app_controller import AppController
from pwr.model.privilege import PrivilegedSection


class FakeRunner:
    """Registra los comandos en lugar de ejecutarlos."""

    def __init__(self, returncode: int = 0):
        self.calls: List[List[str]] = []
        self.returncode = returncode

    def run(self, argv: List[str]) -> int:
        self.calls.append(list(argv))
        return self.returncode


class FakeIds:
    """Sustituye os.getuid / os.geteuid / os.seteuid."""

    def __init__(self, euid: int = 1000, uid: Optional[int] = None):
        self.euid = euid
        self.uid = euid if uid is None else uid
        self.history: List[int] = []
        self.failing_uids: List[int] = []

    def getuid(self) -> int:
        return self.uid

    def geteuid(self) -> int:
        return self.euid

    def seteuid(self, uid: int) -> None:
        if uid in self.failing_uids:
            raise PermissionError(f"seteuid({uid}) refused")
        self.history.append(uid)
        self.euid = uid


def make_executable(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("#!/bin/sh\n", encoding="utf-8")
    path.chmod(0o755)
    return path


class FakeSystem:
    def __init__(self, root: Path):
        self.root = root
        self.cpus = []
        for index in range(2):
            cpufreq = root / "sys" / f"cpu{index}" / "cpufreq"
            cpufreq.mkdir(parents=True)
            governor = cpufreq / "scaling_governor"
            governor.write_text("schedutil\n", encoding="utf-8")
            self.cpus.append(governor)
        self.prime_select = make_executable(root / "bin" / "prime-select")
        self.iwconfig = make_executable(root / "bin" / "iwconfig")
        self.systemctl = make_executable(root / "bin" / "systemctl")
        self.state_file = root / "var" / "pwr_state"
        self.state_file.parent.mkdir(parents=True)
        self.interfaces: Dict[str, Any] = {"lo": [], "enp3s0": [], "wlp2s0": []}
        self.runner = FakeRunner()
        self.ids = FakeIds()

    def config(self) -> Dict[str, Any]:
        return load_config(
            {
                "paths": {
                    "governor_glob": str(self.root / "sys" / "cpu*" / "cpufreq" / "scaling_governor"),
                    "prime_select": str(self.prime_select),
                    "iwconfig": str(self.iwconfig),
                    "systemctl": str(self.systemctl),
                    "state_file": str(self.state_file),
                }
            }
        )

    def controller(self) -> AppController:
        return AppController(
            self.config(),
            runner=self.runner,
            privilege_factory=lambda: PrivilegedSection(self.ids.geteuid, self.ids.seteuid, self.ids.getuid),
            interface_lister=lambda: self.interfaces,
        )

    def governors(self) -> List[str]:
        return [cpu.read_text(encoding="utf-8") for cpu in self.cpus]


@pytest.fixture
def fake_system(tmp_path: Path) -> FakeSystem:
    return FakeSystem(tmp_path)
