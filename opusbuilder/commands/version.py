import click
import importlib.metadata
from ..cli_logger import logger

@click.command()
def version():
    """Print the version of the OpusBuilder tool."""
    try:
        ver = importlib.metadata.version("opusbuilder")
        click.echo(f"OpusBuilder version {ver}")
    except importlib.metadata.PackageNotFoundError:
        logger.error("Error: Could not determine the version of OpusBuilder. Is it installed correctly?")
