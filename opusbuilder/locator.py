import shlex

from packaging.version import parse as parse_version, InvalidVersion

from .cli_logger import logger
from .directives import LinkDirective
from .utils.command_executor import run_shell_command


def find_installed_library(build_env):
    """Return the library directory named by the first override variable that is set."""
    if build_env.lib_dir is None:
        return None
    name, directory = build_env.lib_dir
    logger.info(f"Prebuilt library will be linked from {directory} ({name}).")
    return directory


def _flag_values(libs_output, flag):
    return [item[2:] for item in shlex.split(libs_output) if item.startswith(flag) and len(item) > 2]


def probe_pkg_config(library_name, linkage, min_version=None, runner=run_shell_command):
    """
    Ask pkg-config for an installed copy of the library.

    Returns a LinkDirective on success and None on any failure; a failed
    lookup is never fatal.
    """
    _, stderr, returncode = runner(["pkg-config", "--exists", "--print-errors", library_name])
    if returncode != 0:
        logger.info(f"`pkg-config` could not find `{library_name}`.")
        if stderr:
            logger.debug(stderr.strip())
        return None

    if min_version:
        stdout, _, returncode = runner(["pkg-config", "--modversion", library_name])
        if returncode != 0:
            logger.warning(f"`pkg-config` could not report the version of `{library_name}`.")
            return None
        found = stdout.strip()
        try:
            too_old = parse_version(found) < parse_version(min_version)
        except InvalidVersion:
            logger.warning(f"Could not compare `{library_name}` version {found!r} with {min_version!r}.")
            return None
        if too_old:
            logger.warning(f"Installed `{library_name}` {found} is older than {min_version}, ignoring it.")
            return None

    libs_cmd = ["pkg-config", "--libs"]
    if linkage.is_static:
        libs_cmd.append("--static")
    libs_cmd.append(library_name)
    stdout, stderr, returncode = runner(libs_cmd)
    if returncode != 0:
        logger.warning(f"`pkg-config --libs` failed for `{library_name}`: {stderr.strip()}")
        return None

    library_dirs = _flag_values(stdout, "-L")
    extra_libs = [lib for lib in _flag_values(stdout, "-l") if lib != library_name]
    if extra_libs:
        logger.warning(
            f"`pkg-config` also lists {', '.join('-l' + lib for lib in extra_libs)} for `{library_name}`, "
            "they are not part of the link directive."
        )
    logger.info(f"Found `{library_name}` via `pkg-config`.")
    return LinkDirective(
        library_name=library_name,
        linkage=linkage,
        search_path=library_dirs[0] if library_dirs else None,
    )
