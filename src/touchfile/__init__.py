"""Generate boilerplate source files from a filename.

``tf foo.c`` writes ``foo.c`` with an author/file/date/purpose banner and a
small body suited to the extension. The helpers used by the command line
interface are exported here so they can be reused programmatically.
"""

from __future__ import annotations

from .config import GeneratorConfig
from .errors import (
    FileCreationError,
    InvalidInputError,
    MissingAuthorError,
    MissingExtensionError,
    MissingFilenameError,
    TouchfileError,
    UnsupportedFiletypeError,
)
from .generator import FileGenerator, build_request
from .kinds import FileFamily, FileKind, resolve_kind
from .naming import header_guard, package_guard, split_name, validate_input
from .schema import GenerationRequest, TemplateMetadata
from .template import TemplateRenderer, TemplateRenderingError, render

__all__ = [
    "FileCreationError",
    "FileFamily",
    "FileGenerator",
    "FileKind",
    "GenerationRequest",
    "GeneratorConfig",
    "InvalidInputError",
    "MissingAuthorError",
    "MissingExtensionError",
    "MissingFilenameError",
    "TemplateMetadata",
    "TemplateRenderer",
    "TemplateRenderingError",
    "TouchfileError",
    "UnsupportedFiletypeError",
    "build_request",
    "header_guard",
    "package_guard",
    "render",
    "resolve_kind",
    "split_name",
    "validate_input",
]

__version__ = "0.1.0"
