"""Builds the library from source with its autotools scripts.

The build runs five blocking steps in order: copy the sources into the
workspace, ``sh autogen.sh``, ``sh configure``, ``make`` and ``make install``.
The first step that fails to start or exits non-zero stops the build with an
:class:`~opusbuilder.errors.ExternalToolError` naming that step.
"""

import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .cli_logger import logger
from .directives import LinkDirective
from .errors import ConfigurationError, ExternalToolError
from .utils.command_executor import run_shell_command

FLAGS_32_BIT = "-g -O2 -m32"


@dataclass
class BuildStep:
    name: str
    command: List[str]
    cwd: Optional[str] = None
    env: Optional[Dict[str, str]] = field(default=None, repr=False)


def configure_arguments(linkage, platform, prefix):
    args = ["sh", "configure"]
    if linkage.is_static:
        args += ["--enable-static", "--disable-shared"]
    else:
        args += ["--disable-static", "--enable-shared"]

    if platform.is_cross_compiled():
        if not platform.target_triple:
            raise ConfigurationError(
                "Cross-compiling but the target triple is unknown.",
                hint="The build tool must set TARGET.",
            )
        logger.info(f"The library will be built for cross-compilation to {platform.target_triple}.")
        args.append(f"--host={platform.target_triple}")

    args += [
        "--disable-doc",
        "--disable-extra-programs",
        "--with-pic",
        "--prefix",
        prefix.replace("\\", "/"),
    ]
    return args


def configure_environment(build_env):
    if build_env.platform.is_target_pointer_width_32():
        logger.info("The library will be built for 32-bit.")
        return build_env.subprocess_env(LDFLAGS=FLAGS_32_BIT, CFLAGS=FLAGS_32_BIT)
    logger.info("The library will be built for 64-bit.")
    return build_env.subprocess_env()


class SourceBuildOrchestrator:

    def __init__(self, build_env, linkage, settings, runner=run_shell_command):
        self.build_env = build_env
        self.linkage = linkage
        self.settings = settings
        self.runner = runner

    def plan(self, workspace) -> List[BuildStep]:
        source_path = os.path.abspath(self.settings.source_dir)
        if not os.path.isdir(source_path):
            raise ConfigurationError(
                f"Library source directory not found: {source_path}",
                hint="Check `source_dir` in opusbuilder.toml.",
            )
        logger.info(f"{self.settings.name} source path: {source_path}.")

        env = self.build_env.subprocess_env()
        tree = os.path.join(workspace, os.path.basename(os.path.normpath(source_path)))
        configure_cmd = configure_arguments(self.linkage, self.build_env.platform, workspace)
        return [
            BuildStep("copy", ["cp", "-r", source_path, workspace], env=env),
            BuildStep("autogen", ["sh", "autogen.sh"], cwd=tree, env=env),
            BuildStep("configure", configure_cmd, cwd=tree, env=configure_environment(self.build_env)),
            BuildStep("make", ["make"], cwd=tree, env=env),
            BuildStep("install", ["make", "install"], cwd=tree, env=env),
        ]

    def run_step(self, step: BuildStep):
        logger.info(f"  - Running {step.name}: {' '.join(step.command)}")
        stdout, stderr, returncode = self.runner(step.command, stream_output=True, env=step.env, cwd=step.cwd)
        if returncode != 0:
            logger.error(f"{self.settings.name} {step.name} failed (Exit Code: {returncode}).")
            # Streamed steps report their output tail as stdout, spawn failures as stderr.
            raise ExternalToolError(step.name, returncode, stderr or stdout)

    def build(self, workspace) -> LinkDirective:
        workspace = os.path.abspath(workspace)
        logger.info(f"{self.settings.name} will be built as {self.linkage.linker_word}-library in {workspace}.")
        for step in self.plan(workspace):
            self.run_step(step)

        logger.success(f"{self.settings.name} built and installed.")
        return LinkDirective(
            library_name=self.settings.name,
            linkage=self.linkage,
            search_path=os.path.join(workspace, "lib"),
        )
