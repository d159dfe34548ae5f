from __future__ import annotations

import hashlib
import os
from pathlib import Path

from .aggregate import Group, parse_grouped
from .config import DEFAULT_CONFIG, GhcidConfig
from .errors import OutputFileError
from .logging import get_logger

logger = get_logger(__name__)


def output_file_path(
    storage_dir: str | os.PathLike[str],
    workspace_id: str,
    config: GhcidConfig | None = None,
) -> Path:
    """Stable output file location for a workspace.

    Named after a hash of `workspace_id`, so restarting the tool for the
    same workspace reuses the same file.
    """
    cfg = config or DEFAULT_CONFIG
    digest = hashlib.sha256(workspace_id.encode("utf-8")).hexdigest()[: cfg.hash_length]
    return Path(storage_dir) / f"{cfg.output_prefix}{digest}{cfg.output_suffix}"


def read_output(path: str | os.PathLike[str]) -> str:
    p = Path(path)
    try:
        return p.read_text(encoding="utf-8", errors="replace")
    except FileNotFoundError:
        raise OutputFileError(
            path=str(p),
            message="output file not found",
            hint="start the feedback tool with --outputfile pointing at this path",
        ) from None
    except OSError as e:
        raise OutputFileError(path=str(p), message=f"cannot read output file: {e.strerror or e}") from e


class OutputFile:
    """Output file the feedback tool writes to, owned for one workspace."""

    def __init__(
        self,
        storage_dir: str | os.PathLike[str],
        workspace_id: str,
        *,
        config: GhcidConfig | None = None,
    ) -> None:
        self.workspace_id = workspace_id
        self.path = output_file_path(storage_dir, workspace_id, config)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text("", encoding="utf-8")
        except OSError as e:
            raise OutputFileError(
                path=str(self.path),
                message=f"cannot create output file: {e.strerror or e}",
                hint="check that the storage directory is writable",
            ) from e
        logger.debug("created output file %s for %s", self.path, workspace_id)

    def read_text(self) -> str:
        return read_output(self.path)

    def diagnostics(self, base_dir: str | os.PathLike[str]) -> list[Group]:
        return parse_grouped(base_dir, self.read_text())

    def dispose(self) -> None:
        try:
            self.path.unlink()
        except FileNotFoundError:
            return
        except OSError as e:
            raise OutputFileError(path=str(self.path), message=f"cannot remove output file: {e.strerror or e}") from e
        logger.debug("removed output file %s", self.path)

    def __enter__(self) -> "OutputFile":
        return self

    def __exit__(self, *exc: object) -> None:
        self.dispose()
