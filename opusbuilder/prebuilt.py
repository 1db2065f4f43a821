import os
import shutil

from .cli_logger import logger
from .directives import LinkDirective
from .errors import ArtifactCopyError, ConfigurationError, UnsupportedTargetError

# Target architectures and the directory their prebuilt binaries live in.
ARCH_DIRS = {
    "x86": "x86",
    "x86_64": "x64",
}

DYNAMIC_SUBDIR = "dy"


def find_target_dir(out_dir, pkg_name):
    """
    Walk up from the build output path to the consumer's shared output root.

    The first ancestor whose name contains ``pkg_name`` is the package's own
    build directory; the output root sits two levels above it.
    """
    current = os.path.abspath(out_dir)
    while pkg_name not in os.path.basename(current):
        parent = os.path.dirname(current)
        if parent == current:
            raise ConfigurationError(
                f"Unexpected build path: {out_dir}",
                hint=f"No ancestor directory contains the package name {pkg_name!r}.",
            )
        current = parent
    return os.path.dirname(os.path.dirname(current))


class PrebuiltArtifactLinker:

    def __init__(self, build_env, linkage, settings):
        self.build_env = build_env
        self.linkage = linkage
        self.settings = settings

    def library_dir(self):
        target_arch = self.build_env.platform.target_arch
        arch_dir = ARCH_DIRS.get(target_arch)
        if arch_dir is None:
            raise UnsupportedTargetError(
                f"No prebuilt {self.settings.name} library for architecture {target_arch!r}.",
                hint=f"Supported architectures: {', '.join(sorted(ARCH_DIRS))}.",
            )

        path = os.path.join(self.settings.prebuilt_dir, arch_dir)
        if not self.linkage.is_static:
            path = os.path.join(path, DYNAMIC_SUBDIR)

        if not os.path.isdir(path):
            raise ConfigurationError(f"Prebuilt library directory not found: {path}")
        return os.path.realpath(path)

    def copy_runtime_artifact(self, library_dir):
        source = os.path.join(library_dir, self.settings.runtime_artifact)
        target_dir = find_target_dir(self.build_env.require_out_dir(), self.build_env.require_pkg_name())
        destination = os.path.join(target_dir, self.settings.runtime_artifact)
        logger.info(f"Found build target directory: {target_dir}.")

        try:
            shutil.copy(source, destination)
        except OSError as e:
            raise ArtifactCopyError(
                f"Failed to copy `{self.settings.runtime_artifact}` from `{source}` to `{destination}`.",
                context={"error": str(e)},
            ) from e
        logger.info(f"Copied {self.settings.runtime_artifact} to {destination}.")
        return destination

    def link(self) -> LinkDirective:
        logger.info(f"Using prebuilt {self.linkage.linker_word} {self.settings.name} library.")
        library_dir = self.library_dir()
        destination = None
        if not self.linkage.is_static:
            destination = self.copy_runtime_artifact(library_dir)
        return LinkDirective(
            library_name=self.settings.name,
            linkage=self.linkage,
            search_path=library_dir,
            runtime_artifact_destination=destination,
        )
