"""Settings shared by the output-file manager and the command builder."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GhcidConfig:
    # Feedback tool invocation; may carry arguments, e.g. "stack exec ghcid --".
    command: str = "ghcid"

    # Output file naming: <prefix><hash><suffix>
    output_prefix: str = "ghcid-"
    output_suffix: str = ".txt"
    hash_length: int = 20


DEFAULT_CONFIG = GhcidConfig()
