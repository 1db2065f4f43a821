from __future__ import annotations

import enum

from .cli_logger import logger
from .errors import UnsupportedTargetError


class LinkageKind(enum.Enum):
    STATIC = "static"
    DYNAMIC = "dynamic"

    @property
    def linker_word(self) -> str:
        """Kind as spelled in link-lib directives and paths."""
        return "static" if self is LinkageKind.STATIC else "dylib"

    @property
    def is_static(self) -> bool:
        return self is LinkageKind.STATIC


def default_linkage(platform) -> LinkageKind:
    """
    Linkage expected for the target when nothing asks for a specific one.

    Windows, macOS and musl targets link statically; unix targets with the
    GNU environment link dynamically. Any other target is rejected.
    """
    if platform.is_target_family("windows") or platform.is_target_os("macos") or platform.is_target_env("musl"):
        return LinkageKind.STATIC
    if platform.is_target_family("unix") and platform.is_target_env("gnu"):
        return LinkageKind.DYNAMIC
    raise UnsupportedTargetError(
        "Unsupported target operating system.",
        context={
            "target_family": platform.target_family or "",
            "target_os": platform.target_os or "",
            "target_env": platform.target_env or "",
        },
    )


def resolve_linkage(build_env) -> LinkageKind:
    if build_env.feature_static and build_env.feature_dynamic:
        logger.warning("Both `static` and `dynamic` features are enabled, linking by platform default.")
        linkage = default_linkage(build_env.platform)
    elif build_env.feature_static or build_env.static_override:
        source = build_env.static_override or "`static` feature"
        logger.info(f"Static linking requested by {source}.")
        linkage = LinkageKind.STATIC
    elif build_env.feature_dynamic:
        logger.info("Dynamic feature enabled.")
        linkage = LinkageKind.DYNAMIC
    else:
        logger.info("No feature or environment variable found, linking by default.")
        linkage = default_linkage(build_env.platform)

    logger.info(f"The library will be linked as {linkage.linker_word}-library.")
    return linkage
