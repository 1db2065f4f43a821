import os
from dataclasses import dataclass
from typing import Optional

import toml

from .cli_logger import logger

CONFIG_FILE = "opusbuilder.toml"

DEFAULT_LIBRARY = {
    "name": "opus",
    "source_dir": "opus",
    "prebuilt_dir": "msvc",
    "runtime_artifact": "opus.dll",
}


def default_config():
    return {"library": dict(DEFAULT_LIBRARY)}


def load_config(path="."):
    config_path = os.path.join(path, CONFIG_FILE)
    logger.info(f"Loading configuration from {config_path}")
    if os.path.exists(config_path):
        try:
            with open(config_path, "r") as f:
                return toml.load(f)
        except toml.TomlDecodeError as e:
            logger.error(f"Error decoding TOML file at {config_path}: {e}")
            logger.info("Please check the file's format for syntax errors.")
        except IOError as e:
            logger.error(f"Error reading configuration file at {config_path}: {e}")
            logger.info("Please check file permissions.")
    return {}


def save_config(config, path="."):
    config_path = os.path.join(path, CONFIG_FILE)
    logger.info(f"Saving configuration to {config_path}")
    try:
        with open(config_path, "w") as f:
            toml.dump(config, f)
    except IOError as e:
        logger.error(f"Error saving configuration to {config_path}: {e}")
        logger.info("Please check file permissions and ensure the directory is writable.")


@dataclass(frozen=True)
class LibrarySettings:
    """Where the library's sources and prebuilt binaries live, and what it is called."""

    name: str = DEFAULT_LIBRARY["name"]
    source_dir: str = DEFAULT_LIBRARY["source_dir"]
    prebuilt_dir: str = DEFAULT_LIBRARY["prebuilt_dir"]
    runtime_artifact: str = DEFAULT_LIBRARY["runtime_artifact"]
    min_version: Optional[str] = None

    @classmethod
    def from_config(cls, conf, base_path="."):
        section = dict(DEFAULT_LIBRARY)
        section.update((conf or {}).get("library", {}))
        # Relative directories are taken relative to the project directory.
        return cls(
            name=section["name"],
            source_dir=os.path.join(base_path, section["source_dir"]),
            prebuilt_dir=os.path.join(base_path, section["prebuilt_dir"]),
            runtime_artifact=section["runtime_artifact"],
            min_version=section.get("min_version"),
        )
