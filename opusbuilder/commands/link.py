import click
from .. import config as config_module
from .. import resolver
from ..cli_logger import logger
from ..decorators import handle_exceptions
from ..directives import DirectiveEmitter, FORMATS
from ..environment import BuildEnvironment

@click.command()
@click.pass_context
@click.option("--static", "feature_static", is_flag=True, help="Prefer linking the library statically.")
@click.option("--dynamic", "feature_dynamic", is_flag=True, help="Prefer linking the library dynamically.")
@click.option("--format", "output_format", type=click.Choice(FORMATS), default="cargo", show_default=True,
              help="How link directives are written to stdout.")
@handle_exceptions
def link(ctx, feature_static, feature_dynamic, output_format):
    """Find, build or unpack the library and print its link directives."""
    project_path = ctx.obj["path"]
    conf = config_module.load_config(path=project_path)
    settings = config_module.LibrarySettings.from_config(conf, base_path=project_path)

    build_env = BuildEnvironment.capture(feature_static=feature_static, feature_dynamic=feature_dynamic)
    directive = resolver.link_library(build_env, settings, emitter=DirectiveEmitter(output_format))
    if directive.runtime_artifact_destination:
        logger.info(f"Runtime library placed at {directive.runtime_artifact_destination}.")
