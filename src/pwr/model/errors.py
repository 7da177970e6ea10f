"""
errors.py - Códigos de salida y excepciones de pwr.

Cada fallo fatal tiene su propio código para que los scripts que llaman a pwr
puedan distinguir "falló la escritura al hardware" de "falló el registro de estado".
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    E_OK = 0
    E_NO_ACTION = 1
    E_BAD_ARG = 2
    E_CPUFREQ_WRITE = 3
    E_PWR_STATE_WRITE = 4
    E_PWR_STATE_READ = 5
    E_FORK_FAILED = 6
    E_PRIVILEGE = 7
    E_UNEXPECTED = 8


class PwrError(Exception):
    """
    Error fatal de pwr. Lleva el código de salida y la operación que falló.
    """

    exit_code = ExitCode.E_UNEXPECTED
    operation = "pwr"

    def __init__(self, message: str, operation: str = ""):
        super().__init__(message)
        if operation:
            self.operation = operation


class BadArgumentError(PwrError):
    exit_code = ExitCode.E_BAD_ARG
    operation = "argument parsing"

    def __init__(self, token: str):
        super().__init__(f"Bad argument encountered: {token}")
        self.token = token


class CpuGovernorWriteError(PwrError):
    exit_code = ExitCode.E_CPUFREQ_WRITE
    operation = "cpu governor write"


class StateWriteError(PwrError):
    exit_code = ExitCode.E_PWR_STATE_WRITE
    operation = "power state write"


class StateReadError(PwrError):
    exit_code = ExitCode.E_PWR_STATE_READ
    operation = "power state read"


class SpawnError(PwrError):
    exit_code = ExitCode.E_FORK_FAILED
    operation = "process spawn"


class PrivilegeError(PwrError):
    exit_code = ExitCode.E_PRIVILEGE
    operation = "privilege change"
