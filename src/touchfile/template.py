"""Template bodies for every file kind and the renderer that fills them in."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, MutableMapping

from .kinds import FileKind
from .naming import header_guard, package_guard
from .schema import TemplateMetadata

__all__ = [
    "TEMPLATES",
    "TemplateRenderer",
    "TemplateRenderingError",
    "render",
]


_PLACEHOLDER_PATTERN = re.compile(r"{{\s*(?P<expression>[^{}]+?)\s*}}")

SLASH_RULE = "/" * 72
HASH_RULE = "#" * 72

_SLASH_BANNER = (
    f"{SLASH_RULE}\n"
    "// Author  : {{ author }}\n"
    "// File    : {{ file }}\n"
    "// Date    : {{ date }}\n"
    "// Purpose : {{ purpose }}\n"
    f"{SLASH_RULE}\n"
)

_HASH_BANNER = (
    f"{HASH_RULE}\n"
    "# Author  : {{ author }}\n"
    "# File    : {{ file }}\n"
    "# Date    : {{ date }}\n"
    "# Purpose : {{ purpose }}\n"
    f"{HASH_RULE}\n"
)

C_TEMPLATE = _SLASH_BANNER + """
#include <stdio.h>

int main(int argc, char *argv[]) {
  printf("Hello, World!\\n");
  return 0;
}

"""

H_TEMPLATE = _SLASH_BANNER + f"""
#ifndef {{{{ file|header_guard }}}}
#define {{{{ file|header_guard }}}}

// STRUCTS

// FUNCTIONS

{SLASH_RULE}
#endif
"""

PYTHON_TEMPLATE = '''"""
Author  : {{ author }}
File    : {{ file }}
Date    : {{ date }}
Purpose : {{ purpose }}
"""


def main() -> int:
    return 0


if __name__ == "__main__":
    main()'''

CPP_TEMPLATE = _SLASH_BANNER + """
#include <iostream>

int main(int argc, char *argv[]) {
  std::cout << "Hello, World!" << std::endl;
  return 0;
}

"""

HPP_TEMPLATE = _SLASH_BANNER + f"""
#pragma once

// STRUCTS

// FUNCTIONS

{SLASH_RULE}
"""

BASH_TEMPLATE = "#!/bin/bash\n" + _HASH_BANNER + """set -e # exit immediately on error
set -u # treat unbound variables as errors
set -x # enable tracing

echo "Hello, World!"
"""

SV_MODULE_TEMPLATE = _SLASH_BANNER + """
`default_nettype none

module {{ base }} (
  input logic clk,
  input logic rst
  );

  // TODO - Implementation

endmodule

`default_nettype wire

"""

SV_PACKAGE_TEMPLATE = _SLASH_BANNER + """
`ifndef {{ base|package_guard }}
`define {{ base|package_guard }}

package {{ base }};

  // TODO - Implementation

endpackage: {{ base }}

`endif

"""

TEMPLATES: Mapping[FileKind, str] = {
    FileKind.C: C_TEMPLATE,
    FileKind.H: H_TEMPLATE,
    FileKind.PYTHON: PYTHON_TEMPLATE,
    FileKind.CPP: CPP_TEMPLATE,
    FileKind.HPP: HPP_TEMPLATE,
    FileKind.BASH: BASH_TEMPLATE,
    FileKind.SV_MODULE: SV_MODULE_TEMPLATE,
    FileKind.SV_PACKAGE: SV_PACKAGE_TEMPLATE,
}


class TemplateRenderingError(RuntimeError):
    """Raised when the renderer cannot evaluate a placeholder."""


def _apply_filter(value: Any, filter_name: str, filters: Mapping[str, Callable[[Any], Any]]) -> Any:
    try:
        filter_func = filters[filter_name]
    except KeyError as exc:
        raise TemplateRenderingError(f"unknown filter '{filter_name}'") from exc

    return filter_func(value)


@dataclass(slots=True)
class TemplateRenderer:
    """Render templates with ``{{ placeholder|filters }}`` expressions."""

    filters: MutableMapping[str, Callable[[Any], Any]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.filters:
            self.filters.update(
                {
                    "header_guard": lambda value: header_guard(str(value)),
                    "package_guard": lambda value: package_guard(str(value)),
                }
            )

    def render_string(self, template: str, context: Mapping[str, Any]) -> str:
        """Render ``template`` using ``context``.

        Every placeholder must resolve; a missing key raises
        :class:`TemplateRenderingError` instead of leaking ``{{ ... }}`` into a
        generated file.
        """

        def substitute(match: re.Match[str]) -> str:
            expression = match.group("expression")
            parts = [part.strip() for part in expression.split("|") if part.strip()]
            if not parts:
                return match.group(0)

            key, *filters = parts
            try:
                value = context[key]
            except KeyError:
                raise TemplateRenderingError(f"missing value for '{key}'") from None

            for filter_name in filters:
                value = _apply_filter(value, filter_name, self.filters)

            return str(value)

        return _PLACEHOLDER_PATTERN.sub(substitute, template)


def render(
    kind: FileKind,
    metadata: TemplateMetadata,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Return the body of a new ``kind`` file with ``metadata`` filled in."""

    renderer = renderer or TemplateRenderer()
    return renderer.render_string(TEMPLATES[kind], metadata.context())
