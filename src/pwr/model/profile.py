"""
profile.py - Perfiles de energía, acciones y configuración de ejecución.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pwr.model.errors import StateReadError


class Profile(Enum):
    """
    Los dos perfiles soportados. El valor es la forma canónica que se persiste.
    """

    PERFORM = "perform"
    POWERSAVE = "powersave"

    @classmethod
    def from_token(cls, text: str) -> "Profile":
        """
        Convierte el texto persistido en un Profile.

        Raises:
            StateReadError: si el texto no es "perform" ni "powersave".
        """
        for profile in cls:
            if profile.value == text:
                return profile
        raise StateReadError(f"Unrecognized power state: {text!r}")

    def opposite(self) -> "Profile":
        return Profile.POWERSAVE if self is Profile.PERFORM else Profile.PERFORM


class Action(Enum):
    NONE = "none"
    PERFORM = "perform"
    POWERSAVE = "powersave"
    TOGGLE = "toggle"
    QUERY = "query"
    HELP = "help"
    VERSION = "version"


@dataclass(frozen=True)
class RunConfig:
    """Acción resuelta desde la línea de comandos y sus modificadores."""

    action: Action = Action.NONE
    suppress_restart: bool = False
    program_name: str = "pwr"
