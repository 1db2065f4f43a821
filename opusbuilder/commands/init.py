import click
import os
from .. import config as config_module
from ..cli_logger import logger

@click.command()
@click.pass_context
@click.option("--force", is_flag=True, help="Overwrite an existing opusbuilder.toml.")
def init(ctx, force):
    """Write a default opusbuilder.toml to the project directory."""
    path = ctx.obj["path"]
    config_path = os.path.join(path, config_module.CONFIG_FILE)
    if os.path.exists(config_path) and not force:
        logger.warning(f"{config_path} already exists. Use --force to overwrite it.")
        return
    config_module.save_config(config_module.default_config(), path=path)
    logger.success(f"Created {config_path}.")
