"""One-time capture of every environment input the pipeline reads.

Variables that mean the same thing are kept as ordered candidate lists so the
precedence between them is visible in one place.
"""

from __future__ import annotations

import os
import types
from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple

from .errors import ConfigurationError
from .platform_probe import PlatformFacts

LIB_DIR_VARS = ("LIBOPUS_LIB_DIR", "OPUS_LIB_DIR")
STATIC_VARS = ("LIBOPUS_STATIC", "OPUS_STATIC")
NO_PKG_VARS = ("LIBOPUS_NO_PKG", "OPUS_NO_PKG")

FEATURE_STATIC_VAR = "CARGO_FEATURE_STATIC"
FEATURE_DYNAMIC_VAR = "CARGO_FEATURE_DYNAMIC"
OUT_DIR_VAR = "OUT_DIR"
PKG_NAME_VAR = "CARGO_PKG_NAME"
PKG_ALLOW_CROSS_VAR = "PKG_CONFIG_ALLOW_CROSS"


def first_set(environ: Mapping[str, str], names: Tuple[str, ...]) -> Optional[Tuple[str, str]]:
    """Return ``(name, value)`` of the first variable in ``names`` that is set."""
    for name in names:
        if name in environ:
            return name, environ[name]
    return None


@dataclass(frozen=True)
class BuildEnvironment:
    platform: PlatformFacts
    feature_static: bool = False
    feature_dynamic: bool = False
    lib_dir: Optional[Tuple[str, str]] = None
    static_override: Optional[str] = None
    pkg_bypass: Optional[str] = None
    out_dir: Optional[str] = None
    pkg_name: Optional[str] = None
    pkg_allow_cross: bool = False
    extra: Mapping[str, str] = field(default_factory=lambda: types.MappingProxyType({}), hash=False)

    @classmethod
    def capture(cls, environ=None, feature_static=False, feature_dynamic=False):
        """Snapshot ``environ`` (``os.environ`` by default).

        ``feature_static`` and ``feature_dynamic`` are OR-ed with the feature
        variables the build tool sets.
        """
        if environ is None:
            environ = os.environ
        environ = dict(environ)

        static_hit = first_set(environ, STATIC_VARS)
        bypass_hit = first_set(environ, NO_PKG_VARS)
        return cls(
            platform=PlatformFacts.from_environ(environ),
            feature_static=feature_static or FEATURE_STATIC_VAR in environ,
            feature_dynamic=feature_dynamic or FEATURE_DYNAMIC_VAR in environ,
            lib_dir=first_set(environ, LIB_DIR_VARS),
            static_override=static_hit[0] if static_hit else None,
            pkg_bypass=bypass_hit[0] if bypass_hit else None,
            out_dir=environ.get(OUT_DIR_VAR),
            pkg_name=environ.get(PKG_NAME_VAR),
            pkg_allow_cross=PKG_ALLOW_CROSS_VAR in environ,
            extra=types.MappingProxyType(environ),
        )

    def require_out_dir(self) -> str:
        if not self.out_dir:
            raise ConfigurationError(
                f"Environment variable `{OUT_DIR_VAR}` is missing.",
                hint="Run opusbuilder from the host project's build step.",
            )
        return self.out_dir

    def require_pkg_name(self) -> str:
        if not self.pkg_name:
            raise ConfigurationError(f"Environment variable `{PKG_NAME_VAR}` is missing.")
        return self.pkg_name

    def subprocess_env(self, **overrides) -> dict:
        """Environment for external build steps, based on the captured one."""
        env = dict(self.extra)
        env.update(overrides)
        return env
