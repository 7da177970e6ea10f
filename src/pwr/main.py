"""
main.py - Punto de entrada de pwr.

Interpreta los argumentos, construye el controlador y devuelve el código de
salida de la acción ejecutada.
"""

import sys
from typing import List, Optional

from pwr.cli import parse_args
from pwr.config import load_config
from pwr.controller.app_controller import AppController
from pwr.model.errors import BadArgumentError, PwrError
from pwr.model.privilege import drop_privileges
from pwr.view import console


def main(argv: Optional[List[str]] = None) -> int:
    """
    Función principal de la aplicación.

    Args:
        argv: Argumentos completos, argv[0] incluido (por defecto sys.argv).
    """
    argv = sys.argv if argv is None else argv

    try:
        run_config = parse_args(argv)
    except BadArgumentError as exc:
        print(str(exc), file=sys.stderr)
        return int(exc.exit_code)

    # Con setuid arrancamos como root; sólo los cambios de perfil lo necesitan.
    try:
        drop_privileges()
    except PwrError as exc:
        console.show_error(exc.operation, str(exc))
        return int(exc.exit_code)

    controller = AppController(load_config())
    return controller.dispatch(run_config)


if __name__ == "__main__":
    sys.exit(main())
