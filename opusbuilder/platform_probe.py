"""Target/host descriptors supplied by the invoking build tool."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from .cli_logger import logger
from .errors import ConfigurationError

TARGET_OS_VAR = "CARGO_CFG_TARGET_OS"
TARGET_ENV_VAR = "CARGO_CFG_TARGET_ENV"
TARGET_FAMILY_VAR = "CARGO_CFG_TARGET_FAMILY"
TARGET_POINTER_WIDTH_VAR = "CARGO_CFG_TARGET_POINTER_WIDTH"
HOST_ARCH_VAR = "CARGO_CFG_HOST_ARCH"
TARGET_ARCH_VAR = "CARGO_CFG_TARGET_ARCH"
TARGET_TRIPLE_VAR = "TARGET"


@dataclass(frozen=True)
class PlatformFacts:
    target_os: Optional[str] = None
    target_env: Optional[str] = None
    target_family: Optional[str] = None
    pointer_width: Optional[str] = None
    host_arch: Optional[str] = None
    target_arch: Optional[str] = None
    target_triple: Optional[str] = None

    @classmethod
    def from_environ(cls, environ: Mapping[str, str]) -> "PlatformFacts":
        return cls(
            target_os=environ.get(TARGET_OS_VAR),
            target_env=environ.get(TARGET_ENV_VAR),
            target_family=environ.get(TARGET_FAMILY_VAR),
            pointer_width=environ.get(TARGET_POINTER_WIDTH_VAR),
            host_arch=environ.get(HOST_ARCH_VAR),
            target_arch=environ.get(TARGET_ARCH_VAR),
            target_triple=environ.get(TARGET_TRIPLE_VAR),
        )

    def is_target_family(self, family: str) -> bool:
        # Some targets belong to several families, e.g. "unix,wasm".
        if self.target_family is None:
            return False
        return family in (f.strip() for f in self.target_family.split(","))

    def is_target_os(self, os_name: str) -> bool:
        return self.target_os == os_name

    def is_target_env(self, env: str) -> bool:
        return self.target_env == env

    def is_target_pointer_width_32(self) -> bool:
        return self.pointer_width == "32"

    def is_cross_compiled(self) -> bool:
        if self.host_arch is None:
            raise ConfigurationError(
                "Could not read the host architecture.",
                hint=f"The build tool must set {HOST_ARCH_VAR}.",
            )
        logger.info(f"Host architecture: {self.host_arch!r}.")

        if self.target_arch is None:
            raise ConfigurationError(
                "Could not read the target architecture.",
                hint=f"The build tool must set {TARGET_ARCH_VAR}.",
            )
        logger.info(f"Target architecture: {self.target_arch!r}.")

        return self.host_arch != self.target_arch
