import click
import dataclasses
import json
import os
from .. import config as config_module
from ..cli_logger import logger

@click.group()
@click.pass_context
def config(ctx):
    """View the opusbuilder.toml configuration file."""
    pass

@config.command()
@click.pass_context
def view(ctx):
    """View the contents of the opusbuilder.toml file."""
    conf = config_module.load_config(path=ctx.obj["path"])
    if not conf:
        logger.error("Error: No opusbuilder.toml found. Please run 'opusbuilder init' first.")
        return
    config_file_path = os.path.join(ctx.obj["path"], config_module.CONFIG_FILE)
    try:
        with open(config_file_path, 'r') as f:
            click.echo(f.read())
    except IOError as e:
        logger.error(f"Error reading opusbuilder.toml at {config_file_path}: {e}")
        logger.info("Please check file permissions.")

@config.command()
@click.pass_context
def settings(ctx):
    """Show the library settings in effect, defaults included."""
    conf = config_module.load_config(path=ctx.obj["path"])
    library = config_module.LibrarySettings.from_config(conf, base_path=ctx.obj["path"])
    click.echo(json.dumps(dataclasses.asdict(library), indent=4))
