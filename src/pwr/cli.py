"""
cli.py - Interpretación de los argumentos de línea de comandos.

Convierte los tokens de argv en un RunConfig inmutable. Si se dan varias
acciones gana la última; --norestart / -n puede aparecer en cualquier posición.
"""

from __future__ import annotations

import os
from typing import Dict, List, Optional

from pwr.model.errors import BadArgumentError
from pwr.model.profile import Action, RunConfig

ACTION_TOKENS: Dict[str, Action] = {
    "perform": Action.PERFORM,
    "pe": Action.PERFORM,
    "powersave": Action.POWERSAVE,
    "ps": Action.POWERSAVE,
    "toggle": Action.TOGGLE,
    "to": Action.TOGGLE,
    "query": Action.QUERY,
    "qu": Action.QUERY,
    "--help": Action.HELP,
    "--version": Action.VERSION,
}

NORESTART_TOKENS = ("--norestart", "-n")


def parse_args(argv: List[str]) -> RunConfig:
    """
    Construye el RunConfig a partir de argv completo (argv[0] incluido).

    Raises:
        BadArgumentError: ante el primer token desconocido.
    """
    program_name: Optional[str] = argv[0] if argv else None
    action = Action.NONE
    suppress_restart = False

    for token in argv[1:]:
        if token in ACTION_TOKENS:
            action = ACTION_TOKENS[token]
        elif token in NORESTART_TOKENS:
            suppress_restart = True
        else:
            raise BadArgumentError(token)

    return RunConfig(
        action=action,
        suppress_restart=suppress_restart,
        program_name=os.path.basename(program_name) if program_name else "pwr",
    )
