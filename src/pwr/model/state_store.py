"""
state_store.py - Persistencia del último perfil aplicado.

El estado es una sola línea ("perform" o "powersave") en un archivo fijo,
normalmente /var/lib/pwr_state, que sólo root puede escribir. No hay bloqueo:
se asume que las invocaciones no se solapan.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

from pwr.model.errors import StateReadError, StateWriteError
from pwr.model.profile import Profile


class ProfileStateStore:
    """
    Lee y escribe el registro del perfil actual.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def read_profile(self) -> Profile:
        """
        Lee el perfil persistido.

        Raises:
            StateReadError: si el archivo no se puede abrir o su contenido no
                es un perfil válido. Nunca se devuelve un perfil por defecto.
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                line = f.readline()
        except (OSError, UnicodeDecodeError) as exc:
            raise StateReadError(f"Could not read {self.path}: {exc}") from exc
        return Profile.from_token(line.rstrip("\n"))

    def write_profile(self, profile: Profile) -> None:
        """
        Sobrescribe el registro con la forma canónica de `profile`.

        Raises:
            StateWriteError: si el archivo no se puede abrir para escritura.
        """
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(f"{profile.value}\n")
        except OSError as exc:
            raise StateWriteError(f"Could not write {self.path}: {exc}") from exc
