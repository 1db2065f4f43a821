"""Link directives and the single point that hands them to the host build tool."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from typing import List, Optional

from .cli_logger import logger
from .errors import DirectiveError
from .linkage import LinkageKind

FORMATS = ("cargo", "json")


@dataclass(frozen=True)
class LinkDirective:
    library_name: str
    linkage: LinkageKind
    search_path: Optional[str] = None
    runtime_artifact_destination: Optional[str] = None

    def to_lines(self) -> List[str]:
        lines = [f"cargo:rustc-link-lib={self.linkage.linker_word}={self.library_name}"]
        if self.search_path:
            lines.append(f"cargo:rustc-link-search=native={self.search_path}")
        return lines

    def to_dict(self) -> dict:
        return {
            "library_name": self.library_name,
            "linkage": self.linkage.value,
            "search_path": self.search_path,
            "runtime_artifact_destination": self.runtime_artifact_destination,
        }


class DirectiveEmitter:
    """Writes exactly one directive per invocation."""

    def __init__(self, output_format="cargo", stream=None):
        if output_format not in FORMATS:
            raise ValueError(f"Unknown directive format: {output_format}")
        self.output_format = output_format
        self.stream = stream
        self.emitted = None

    def emit(self, directive: LinkDirective) -> LinkDirective:
        if self.emitted is not None:
            raise DirectiveError(
                "A link directive was already emitted for this invocation.",
                context={"first": repr(self.emitted), "second": repr(directive)},
            )
        self.emitted = directive

        stream = self.stream or sys.stdout
        if self.output_format == "json":
            print(json.dumps(directive.to_dict()), file=stream)
        else:
            for line in directive.to_lines():
                print(line, file=stream)
        stream.flush()

        logger.success(
            f"Linking {directive.library_name} as {directive.linkage.linker_word}"
            + (f" from {directive.search_path}." if directive.search_path else ".")
        )
        return directive
