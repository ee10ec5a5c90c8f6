"""Validated, immutable records passed between the generation steps."""

from __future__ import annotations

from datetime import date
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field

from .kinds import FileKind

DATE_FORMAT = "%m/%d/%Y"
PURPOSE = "TODO"


class GenerationRequest(BaseModel):
    """A name that passed validation and resolved to a known kind."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    base: str = Field(..., description="Requested filename without its extension.")
    kind: FileKind = Field(..., description="Kind resolved from the requested extension.")

    @property
    def filename(self) -> str:
        return f"{self.base}.{self.kind.extension}"


class TemplateMetadata(BaseModel):
    """Values substituted into the banner of a generated file."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    author: str = Field(..., description="Account name of the invoking user.")
    base: str = Field(..., description="Requested filename without its extension.")
    file: str = Field(..., description="Output filename, base plus extension.")
    created: date = Field(..., description="Calendar date the invocation started.")

    @property
    def formatted_date(self) -> str:
        return self.created.strftime(DATE_FORMAT)

    def context(self) -> Dict[str, str]:
        """Return a mapping compatible with :class:`~touchfile.template.TemplateRenderer`."""

        return {
            "author": self.author,
            "file": self.file,
            "date": self.formatted_date,
            "purpose": PURPOSE,
            "base": self.base,
        }


__all__ = ["DATE_FORMAT", "PURPOSE", "GenerationRequest", "TemplateMetadata"]
