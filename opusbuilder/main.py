import click
from .commands import *


@click.group()
@click.option("--path", "-p", default=".", help="Path to the project directory.")
@click.pass_context
def cli(ctx, path):
    """OpusBuilder: decide how to link the Opus library and provide it."""
    ctx.obj = {"path": path}

cli.add_command(link)
cli.add_command(probe)
cli.add_command(init)
cli.add_command(config)
cli.add_command(log)
cli.add_command(version)

if __name__ == '__main__':
    cli()
