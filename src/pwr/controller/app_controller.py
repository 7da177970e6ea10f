"""
app_controller.py - Controlador principal de pwr.

Este módulo contiene la clase AppController, que recibe un RunConfig ya
resuelto y ejecuta exactamente una acción: consultar el estado, cambiar de
perfil (con privilegios elevados) o mostrar ayuda/versión. Traduce los
errores del modelo en códigos de salida.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, TextIO

from pwr.config import load_config
from pwr.model.display_manager import DisplayManager
from pwr.model.errors import ExitCode, PwrError
from pwr.model.gpu_manager import GPUManager
from pwr.model.power_manager import PowerManager
from pwr.model.privilege import PrivilegedSection
from pwr.model.process_runner import ProcessRunner
from pwr.model.profile import Action, Profile, RunConfig
from pwr.model.state_store import ProfileStateStore
from pwr.model.wireless_manager import WirelessManager
from pwr.view import console


class AppController:
    """
    Despachador de acciones.

    Cada colaborador del sistema (runner de procesos, elevación de
    privilegios, listado de interfaces) es inyectable para poder probar el
    flujo completo sin tocar el sistema real.
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        runner: Optional[ProcessRunner] = None,
        privilege_factory: Optional[Callable[[], PrivilegedSection]] = None,
        interface_lister: Optional[Callable[[], Dict[str, Any]]] = None,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
    ):
        """
        Args:
            config: Configuración (por defecto load_config()).
            runner: Ejecutor de procesos externos.
            privilege_factory: Crea la sección privilegiada de cada cambio.
            interface_lister: Sustituto de psutil.net_if_addrs.
            out: Flujo para la salida normal (por defecto sys.stdout).
            err: Flujo para diagnósticos (por defecto sys.stderr).
        """
        self.config = config or load_config()
        self._runner = runner or ProcessRunner()
        self._privilege_factory = privilege_factory or PrivilegedSection
        self._out = out
        self._err = err

        paths = self.config["paths"]
        self.power = PowerManager(paths["governor_glob"])
        self.gpu = GPUManager(paths["prime_select"], self._runner)
        self.wireless = WirelessManager(
            paths["iwconfig"],
            self._runner,
            prefix=self.config.get("wireless_prefix", "wl"),
            interface_lister=interface_lister,
        )
        self.display = DisplayManager(paths["systemctl"], self._runner)
        self.store = ProfileStateStore(paths["state_file"])

    def dispatch(self, run_config: RunConfig) -> int:
        """
        Ejecuta la acción de `run_config` y devuelve el código de salida.
        """
        try:
            return int(self._dispatch(run_config))
        except PwrError as exc:
            console.show_error(exc.operation, str(exc), self._err)
            return int(exc.exit_code)

    def _dispatch(self, run_config: RunConfig) -> ExitCode:
        action = run_config.action

        if action is Action.NONE:
            console.show_no_action(run_config.program_name, self._err)
            return ExitCode.E_NO_ACTION
        if action is Action.PERFORM:
            return self.switch(Profile.PERFORM, run_config.suppress_restart)
        if action is Action.POWERSAVE:
            return self.switch(Profile.POWERSAVE, run_config.suppress_restart)
        if action is Action.TOGGLE:
            return self.toggle(run_config.suppress_restart)
        if action is Action.QUERY:
            console.show_profile(self.store.read_profile().value, self._out)
            return ExitCode.E_OK
        if action is Action.HELP:
            console.show_help(run_config.program_name, self._out)
            return ExitCode.E_OK
        if action is Action.VERSION:
            console.show_version(self._out)
            return ExitCode.E_OK
        raise ValueError(f"Unhandled action: {action}")

    def toggle(self, suppress_restart: bool = False) -> ExitCode:
        """
        Cambia al perfil contrario al persistido. Un fallo de lectura se propaga.
        """
        current = self.store.read_profile()
        return self.switch(current.opposite(), suppress_restart)

    def switch(self, profile: Profile, suppress_restart: bool = False) -> ExitCode:
        """
        Aplica `profile` con privilegios elevados y lo persiste.

        Los cuatro mutadores se ejecutan siempre en el mismo orden; un error
        fatal aborta el resto sin deshacer lo ya aplicado.
        """
        settings = self.config["profiles"][profile.value]
        with self._privilege_factory():
            self.apply_mutators(settings, suppress_restart)
            self.store.write_profile(profile)
        return ExitCode.E_OK

    def apply_mutators(self, settings: Dict[str, Any], suppress_restart: bool) -> None:
        """
        Ejecuta los cuatro mutadores en orden fijo: gobernador, GPU, wifi y
        display manager. Los que no tienen capacidad se omiten en silencio.
        """
        self.power.set_governor(settings["governor"])
        self.gpu.select(settings["gpu"])
        self.wireless.set_power(settings["wireless_power"])
        self.display.restart(suppress=suppress_restart)
