"""
privilege.py - Elevación temporal de privilegios.

pwr se instala con el bit setuid: arranca con uid efectivo 0 y uid real del
usuario. drop_privileges() vuelve a la identidad del usuario antes de hacer
nada; PrivilegedSection pasa a root (seteuid(0)) sólo mientras se aplica un
perfil y devuelve el uid efectivo al uid real en cualquier salida, incluidas
las excepciones.
"""

from __future__ import annotations

import os
import sys
from typing import Callable, Optional

from pwr.model.errors import PrivilegeError

ROOT_UID = 0


def drop_privileges(
    getuid: Optional[Callable[[], int]] = None,
    geteuid: Optional[Callable[[], int]] = None,
    seteuid: Optional[Callable[[int], None]] = None,
) -> None:
    """
    Fija el uid efectivo al uid real del usuario que invocó pwr.

    Raises:
        PrivilegeError: si no se puede cambiar el uid efectivo.
    """
    getuid = getuid or os.getuid
    geteuid = geteuid or os.geteuid
    seteuid = seteuid or os.seteuid

    user_uid = getuid()
    if geteuid() == user_uid:
        return
    try:
        seteuid(user_uid)
    except OSError as exc:
        raise PrivilegeError(f"Could not drop privileges to uid {user_uid}: {exc}") from exc


class PrivilegedSection:
    """
    Context manager que eleva a root y vuelve al uid real al salir.
    """

    def __init__(
        self,
        geteuid: Optional[Callable[[], int]] = None,
        seteuid: Optional[Callable[[int], None]] = None,
        getuid: Optional[Callable[[], int]] = None,
    ):
        self._geteuid = geteuid or os.geteuid
        self._seteuid = seteuid or os.seteuid
        self._getuid = getuid or os.getuid
        self._user_uid: Optional[int] = None
        self.elevated = False

    def __enter__(self) -> "PrivilegedSection":
        self._user_uid = self._getuid()
        if self._geteuid() != ROOT_UID:
            try:
                self._seteuid(ROOT_UID)
            except PermissionError as exc:
                # Sin setuid seguimos con la identidad actual; las escrituras
                # posteriores fallarán con su propio código de error.
                print(f"[PrivilegedSection] Could not elevate privileges: {exc}", file=sys.stderr)
        self.elevated = self._geteuid() == ROOT_UID
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.elevated = False
        if self._geteuid() == self._user_uid:
            return False
        try:
            self._seteuid(self._user_uid)
        except OSError as restore_exc:
            message = f"Could not restore uid {self._user_uid}: {restore_exc}"
            if exc is not None:
                # Ya se propaga otro error; no lo ocultamos.
                print(f"[PrivilegedSection] {message}", file=sys.stderr)
                return False
            raise PrivilegeError(message) from restore_exc
        return False
