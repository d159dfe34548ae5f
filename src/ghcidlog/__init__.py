from __future__ import annotations

from .api import Entry, Group, aggregate, parse, parse_file, parse_grouped
from .command import feedback_command
from .config import DEFAULT_CONFIG, GhcidConfig
from .diagnostic import Diagnostic, Severity
from .errors import OutputFileError
from .outputfile import OutputFile, output_file_path
from .spans import FileLocation, SourcePosition, SourceRange

__all__ = [
    "DEFAULT_CONFIG",
    "Diagnostic",
    "Entry",
    "FileLocation",
    "GhcidConfig",
    "Group",
    "OutputFile",
    "OutputFileError",
    "Severity",
    "SourcePosition",
    "SourceRange",
    "aggregate",
    "feedback_command",
    "output_file_path",
    "parse",
    "parse_file",
    "parse_grouped",
]
