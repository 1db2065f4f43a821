import dataclasses
import json

import click
from ..decorators import handle_exceptions
from ..environment import BuildEnvironment
from ..linkage import resolve_linkage
from ..resolver import select_strategy

@click.command()
@click.option("--static", "feature_static", is_flag=True, help="Prefer linking the library statically.")
@click.option("--dynamic", "feature_dynamic", is_flag=True, help="Prefer linking the library dynamically.")
@handle_exceptions
def probe(feature_static, feature_dynamic):
    """Show the detected platform and the linking decision without building anything."""
    build_env = BuildEnvironment.capture(feature_static=feature_static, feature_dynamic=feature_dynamic)
    report = {
        "platform": dataclasses.asdict(build_env.platform),
        "strategy": select_strategy(build_env.platform).value,
        "linkage": resolve_linkage(build_env).value,
        "library_dir_override": build_env.lib_dir[0] if build_env.lib_dir else None,
        "pkg_config_bypass": build_env.pkg_bypass,
    }
    click.echo(json.dumps(report, indent=4))
