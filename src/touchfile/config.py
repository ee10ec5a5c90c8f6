"""Startup configuration shared by the generator and CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import date
from typing import Mapping

from .errors import MissingAuthorError
from .schema import GenerationRequest, TemplateMetadata

AUTHOR_VARIABLE = "LOGNAME"


@dataclass(slots=True, frozen=True)
class GeneratorConfig:
    """Values resolved once per invocation.

    Attributes
    ----------
    author:
        Name written into the ``Author`` banner field. Normally the login name
        of the invoking user.
    today:
        Date written into the ``Date`` banner field. Fixed when the config is
        built so every file rendered from it carries the same date.
    """

    author: str
    today: date

    @classmethod
    def from_environment(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        today: date | None = None,
    ) -> "GeneratorConfig":
        """Build a :class:`GeneratorConfig` from ``$LOGNAME`` and the local date.

        Raises :class:`MissingAuthorError` when ``$LOGNAME`` is unset or empty.
        """

        environ = os.environ if environ is None else environ
        author = environ.get(AUTHOR_VARIABLE, "")
        if not author:
            raise MissingAuthorError(AUTHOR_VARIABLE)
        return cls(author=author, today=today or date.today())

    def metadata(self, request: GenerationRequest) -> TemplateMetadata:
        """Return the banner values for ``request``."""

        return TemplateMetadata(
            author=self.author,
            base=request.base,
            file=request.filename,
            created=self.today,
        )


__all__ = ["AUTHOR_VARIABLE", "GeneratorConfig"]
