"""Top-level driver: decides where the library comes from and emits one directive."""

from __future__ import annotations

import enum

from .cli_logger import logger
from .directives import DirectiveEmitter, LinkDirective
from .errors import DirectiveError
from .linkage import resolve_linkage
from .locator import find_installed_library, probe_pkg_config
from .prebuilt import PrebuiltArtifactLinker
from .source_build import SourceBuildOrchestrator
from .utils.command_executor import run_shell_command


class BuildStrategy(enum.Enum):
    SOURCE_BUILD = "source-build"
    PREBUILT = "prebuilt"


def select_strategy(platform) -> BuildStrategy:
    """MSVC targets have no POSIX build chain and use the prebuilt binaries."""
    if platform.is_target_family("windows") and platform.is_target_env("msvc"):
        return BuildStrategy.PREBUILT
    return BuildStrategy.SOURCE_BUILD


def _locate_or_build(build_env, settings, linkage, strategy, runner) -> LinkDirective:
    installed = find_installed_library(build_env)
    if installed is not None:
        return LinkDirective(settings.name, linkage, search_path=installed)

    if strategy is BuildStrategy.SOURCE_BUILD:
        if build_env.pkg_bypass:
            logger.info(f"Bypassed `pkg-config` ({build_env.pkg_bypass}).")
        elif build_env.platform.is_cross_compiled() and not build_env.pkg_allow_cross:
            logger.info("Skipped `pkg-config` for cross-compilation, set PKG_CONFIG_ALLOW_CROSS to use it.")
        else:
            found = probe_pkg_config(settings.name, linkage, settings.min_version, runner=runner)
            if found is not None:
                return found

        workspace = build_env.require_out_dir()
        orchestrator = SourceBuildOrchestrator(build_env, linkage, settings, runner=runner)
        return orchestrator.build(workspace)

    return PrebuiltArtifactLinker(build_env, linkage, settings).link()


def link_library(build_env, settings, emitter=None, runner=run_shell_command) -> LinkDirective:
    """
    Resolve how to link the library and emit the matching directive.

    Order: explicit library directory, pkg-config (source-build targets
    only), then building from source or linking the prebuilt binaries.
    """
    emitter = emitter or DirectiveEmitter()
    linkage = resolve_linkage(build_env)
    strategy = select_strategy(build_env.platform)
    logger.info(f"Selected {strategy.value} strategy.")

    directive = _locate_or_build(build_env, settings, linkage, strategy, runner)
    if directive is None:
        raise DirectiveError(f"No link directive was produced for {settings.name}.")
    return emitter.emit(directive)
