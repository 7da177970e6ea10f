"""
console.py - Salida de texto de pwr.

Vista de consola: ayuda, versión, consulta de estado y mensajes de error.
Todo lo que el usuario lee pasa por aquí.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from pwr.config import VERSION

HELP_ACTIONS = [
    ("perform (pe)", "Go into performance mode."),
    ("powersave (ps)", "Go into power-saving mode."),
    ("toggle (to)", "Toggles the current state."),
    ("query (qu)", "Query the current state, prints 'perform' or 'powersave'."),
    ("--help", "Prints this help information."),
    ("--version", "Prints version, contact, and copyright information."),
]

HELP_FLAGS = [
    ("--norestart (-n)", "Do not restart display manager after changing modes."),
]


def help_text(program_name: str) -> str:
    lines = [
        "pwr - Switches between performance and power-saving modes.",
        f"Usage: {program_name} [action] [flags]",
        "Actions:",
    ]
    lines += [f" {name:<18}{desc}" for name, desc in HELP_ACTIONS]
    lines += ["", "Flags:"]
    lines += [f" {name:<18}{desc}" for name, desc in HELP_FLAGS]
    return "\n".join(lines)


def version_text() -> str:
    return "\n".join(
        [
            f"pwr v{VERSION}",
            "Copyright 2018 Ethan McTague.",
            "Licensed under the MIT License.",
            "https://github.com/emctague/pwr",
        ]
    )


def show_help(program_name: str, out: Optional[TextIO] = None) -> None:
    print(help_text(program_name), file=out or sys.stdout)


def show_version(out: Optional[TextIO] = None) -> None:
    print(version_text(), file=out or sys.stdout)


def show_profile(name: str, out: Optional[TextIO] = None) -> None:
    print(name, file=out or sys.stdout)


def show_no_action(program_name: str, err: Optional[TextIO] = None) -> None:
    stream = err or sys.stderr
    print("No action specified", file=stream)
    print(f"Run `{program_name} --help` for help.", file=stream)


def show_error(operation: str, message: str, err: Optional[TextIO] = None) -> None:
    print(f"Error on {operation}: {message}", file=err or sys.stderr)
