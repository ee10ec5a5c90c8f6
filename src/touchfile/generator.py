"""Single file generation."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .config import GeneratorConfig
from .errors import FileCreationError
from .kinds import resolve_kind
from .logging import get_logger
from .naming import split_name
from .permissions import PermissionSetter, default_permissions
from .schema import GenerationRequest
from .template import TemplateRenderer, render

__all__ = ["FileGenerator", "build_request"]

LOGGER = get_logger(__name__)


def build_request(name: str) -> GenerationRequest:
    """Validate ``name`` and resolve its extension into a :class:`GenerationRequest`."""

    base, extension = split_name(name)
    return GenerationRequest(base=base, kind=resolve_kind(extension))


@dataclass(slots=True)
class FileGenerator:
    """Render a template for a request and write it to disk."""

    renderer: TemplateRenderer
    permissions: PermissionSetter

    def __init__(
        self,
        renderer: TemplateRenderer | None = None,
        permissions: PermissionSetter | None = None,
    ) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.permissions = permissions or default_permissions()

    def write(self, path: str | Path, content: str, *, executable: bool = False) -> Path:
        """Write ``content`` to ``path``, replacing any existing file.

        The content is encoded before the file is opened, so text that is not
        valid UTF-8 fails without creating anything. When ``executable`` is set
        the file mode is changed after the write.
        A failure there leaves the written file in place.
        """

        path = Path(path)
        try:
            data = content.encode("utf-8")
            path.write_bytes(data)
        except (OSError, UnicodeError) as exc:
            raise FileCreationError(path, exc) from exc

        if executable:
            LOGGER.debug("marking %s executable", path)
            try:
                self.permissions.mark_executable(path)
            except OSError as exc:
                raise FileCreationError(path, exc) from exc

        return path

    def generate(
        self,
        request: GenerationRequest,
        config: GeneratorConfig,
        directory: str | Path = ".",
    ) -> Path:
        """Create the file described by ``request`` inside ``directory``."""

        metadata = config.metadata(request)
        LOGGER.debug("rendering %s template for %s", request.kind.label, metadata.file)
        content = render(request.kind, metadata, self.renderer)
        path = self.write(Path(directory) / request.filename, content, executable=request.kind.executable)
        LOGGER.info("created %s", path)
        return path
