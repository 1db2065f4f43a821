"""Error types raised by the link pipeline.

Every fatal condition raises a subclass of :class:`OpusBuilderError`. Soft
misses (an unset override, a failed pkg-config probe) never raise; they are
logged and the pipeline falls back to the next strategy.
"""

from __future__ import annotations

from collections.abc import Mapping


class OpusBuilderError(Exception):
    """Base error carrying an optional hint and context."""

    hint: str | None
    context: Mapping[str, str]

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        context: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message)
        self.hint = hint
        self.context = dict(context or {})

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.hint:
            parts.append(f"Hint: {self.hint}")
        for k, v in self.context.items():
            if v:
                parts.append(f"  {k}: {v}")
        return "\n".join(parts)


class ConfigurationError(OpusBuilderError):
    """The invocation cannot succeed on this machine as configured."""


class UnsupportedTargetError(ConfigurationError):
    """No linking policy is modeled for the target platform."""


class ExternalToolError(OpusBuilderError):
    """An external build step failed to spawn or exited non-zero."""

    def __init__(self, step: str, returncode: int, detail: str = "") -> None:
        super().__init__(
            f"Build step '{step}' failed with exit status {returncode}.",
            context={"detail": detail.strip()},
        )
        self.step = step
        self.returncode = returncode
        self.detail = detail


class ArtifactCopyError(OpusBuilderError):
    """The runtime shared library could not be placed next to the output."""


class DirectiveError(OpusBuilderError):
    """Zero or more than one link directive was produced."""
