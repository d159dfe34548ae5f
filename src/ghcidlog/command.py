from __future__ import annotations

import os
import shlex

from .config import DEFAULT_CONFIG, GhcidConfig


def feedback_command(
    output_path: str | os.PathLike[str],
    *,
    command: str | None = None,
    windows: bool | None = None,
    config: GhcidConfig | None = None,
) -> list[str]:
    """Argv that runs the feedback tool with its output redirected to `output_path`.

    On Windows the command goes through `cmd.exe /k` so the terminal stays
    open after the tool exits.
    """
    cfg = config or DEFAULT_CONFIG
    cmd = command if command is not None else cfg.command
    flag = f"--outputfile={os.fspath(output_path)}"
    if windows is None:
        windows = os.name == "nt"
    if windows:
        return ["cmd.exe", "/k", f"{cmd} {flag}"]
    return [*shlex.split(cmd), flag]
