"""Console script for volumectl."""
import logging
import sys

import click
import httpx
from rich.console import Console
from rich.markup import escape

from volumectl import volumes
from volumectl.client import ApiClient
from volumectl.config import Settings, load_settings
from volumectl.errors import VolumectlError
from volumectl.filters import VolumeFilter
from volumectl.render import volumectl_theme

err_console = Console(stderr=True, theme=volumectl_theme, highlight=False)


def make_client(settings: Settings) -> ApiClient:
    return ApiClient(settings)


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(message)s",
        force=True,
    )


def parse_opts(ctx, param, values):
    """Turn repeated ``key=value`` flags into a dict."""
    opts = {}
    for value in values:
        key, sep, val = value.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"{value!r} is not in the form key=value", ctx=ctx, param=param)
        opts[key] = val
    return opts


class VolumectlGroup(click.Group):
    """Top level group reporting command failures as ``Error: ...`` with exit code 1."""

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except (VolumectlError, httpx.HTTPError) as e:
            err_console.print(f"[error]Error:[/error] {escape(str(e))}", soft_wrap=True)
            sys.exit(1)


def run_handler(handler, *args) -> None:
    ctx = click.get_current_context()
    settings = load_settings(target=ctx.find_root().params.get("target"))
    with make_client(settings) as client:
        handler(client, *args)


@click.group(cls=VolumectlGroup)
@click.option("--debug/--no-debug", default=False, help="Log HTTP requests to stderr.")
@click.option("--target", default=None, help="API base URL (overrides VOLUMECTL_TARGET and the config file).")
def cli(debug, target):
    """volumectl - manage persistent volumes and their binds to apps."""
    configure_logging(debug)


@cli.group()
def volume():
    """Manage persistent volumes."""
    pass


@volume.command()
@click.argument("name")
@click.argument("plan")
@click.option("-p", "--pool", default="", help="The pool that owns the volume (mandatory if the user has access to more than one pool).")
@click.option("-t", "--team", default="", help="The team that owns the volume (mandatory if the user has access to more than one team).")
@click.option("-o", "--opt", "opts", multiple=True, callback=parse_opts, metavar="KEY=VALUE", help="Backend specific volume option, can be repeated.")
def create(name, plan, pool, team, opts):
    """Create a new persistent volume based on a volume plan."""
    run_handler(volumes.volume_create, volumes.CreateOptions(name, plan, pool, team, opts))


@volume.command()
@click.argument("name")
@click.argument("plan")
@click.option("-p", "--pool", default="", help="The pool that owns the volume (mandatory if the user has access to more than one pool).")
@click.option("-t", "--team", default="", help="The team that owns the volume (mandatory if the user has access to more than one team).")
@click.option("-o", "--opt", "opts", multiple=True, callback=parse_opts, metavar="KEY=VALUE", help="Backend specific volume option, can be repeated.")
def update(name, plan, pool, team, opts):
    """Update an existing persistent volume."""
    run_handler(volumes.volume_update, volumes.CreateOptions(name, plan, pool, team, opts))


@volume.command(name="list")
@click.option("-n", "--name", default="", help="Filter volumes by name.")
@click.option("-o", "--pool", default="", help="Filter volumes by pool.")
@click.option("-p", "--plan", default="", help="Filter volumes by plan.")
@click.option("-t", "--team", default="", help="Filter volumes by team owner.")
@click.option("-q", "simplified", is_flag=True, help="Display only volume names.")
@click.option("--json", "output_json", is_flag=True, help="Display in JSON format.")
def list_volumes(name, pool, plan, team, simplified, output_json):
    """List existing persistent volumes."""
    options = volumes.ListOptions(
        filter=VolumeFilter(name=name, pool=pool, plan=plan, team_owner=team),
        simplified=simplified,
        json=output_json,
    )
    run_handler(volumes.volume_list, options)


@volume.command()
@click.argument("name")
@click.option("--json", "output_json", is_flag=True, help="Show JSON.")
def info(name, output_json):
    """Show a volume, its binds and options."""
    run_handler(volumes.volume_info, volumes.InfoOptions(name, json=output_json))


@volume.command()
@click.argument("name")
def delete(name):
    """Delete an existing persistent volume."""
    run_handler(volumes.volume_delete, name)


@volume.command()
@click.argument("name")
@click.argument("mount_point")
@click.option("-a", "--app", default="", help="The name of the app.")
@click.option("-r", "--readonly", "read_only", is_flag=True, help="The volume will be available only for reading.")
@click.option("--no-restart", is_flag=True, help="Prevents restarting the application.")
def bind(name, mount_point, app, read_only, no_restart):
    """Bind an existing volume to an application."""
    options = volumes.BindOptions(
        name=name,
        mount_point=mount_point,
        app_source=volumes.FlagAppName(app),
        read_only=read_only,
        no_restart=no_restart,
    )
    run_handler(volumes.volume_bind, options)


@volume.command()
@click.argument("name")
@click.argument("mount_point")
@click.option("-a", "--app", default="", help="The name of the app.")
@click.option("--no-restart", is_flag=True, help="Prevents restarting the application.")
def unbind(name, mount_point, app, no_restart):
    """Unbind a volume from an application."""
    options = volumes.UnbindOptions(
        name=name,
        mount_point=mount_point,
        app_source=volumes.FlagAppName(app),
        no_restart=no_restart,
    )
    run_handler(volumes.volume_unbind, options)


@volume.group()
def plan():
    """Work with volume plans."""
    pass


@plan.command(name="list")
def list_plans():
    """List existing volume plans."""
    run_handler(volumes.volume_plan_list)
