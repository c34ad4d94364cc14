"""Volume command handlers.

Each handler takes an ``ApiClient``, an options object filled in by the CLI and
an output stream. It sends exactly one request and renders the result; errors
are raised to the caller untouched.
"""
import sys
from dataclasses import dataclass, field
from typing import IO, Dict, Optional
from urllib.parse import quote

from httpx import codes

from volumectl import codec
from volumectl.client import ApiClient, stream_json_messages
from volumectl.errors import AppNameError
from volumectl.filters import VolumeFilter
from volumectl.models import Volume, VolumePlan
from volumectl.render import (
    render_plan_list,
    render_volume_info,
    render_volume_list,
    select_output_mode,
    write_json,
    write_no_volumes,
)


def _volume_path(name: str, suffix: str = "") -> str:
    return f"/volumes/{quote(name, safe='')}{suffix}"


def _output(out: Optional[IO[str]]) -> IO[str]:
    return out if out is not None else sys.stdout


class AppNameSource:
    """Something that can tell which app a command applies to."""

    def resolve_app_name(self) -> str:
        raise NotImplementedError


class FlagAppName(AppNameSource):
    """App name taken from the ``-a/--app`` flag."""

    def __init__(self, app: Optional[str]):
        self.app = app or ""

    def resolve_app_name(self) -> str:
        if not self.app:
            raise AppNameError(
                "The name of the app is required. Use the -a/--app flag to specify it."
            )
        return self.app


@dataclass
class CreateOptions:
    """Options shared by ``volume create`` and ``volume update``."""
    name: str
    plan: str
    pool: str = ""
    team: str = ""
    opts: Dict[str, str] = field(default_factory=dict)

    def to_volume(self) -> Volume:
        return Volume(
            name=self.name,
            plan=VolumePlan(name=self.plan),
            pool=self.pool,
            team_owner=self.team,
            opts=dict(self.opts),
        )


@dataclass
class ListOptions:
    filter: VolumeFilter = field(default_factory=VolumeFilter)
    simplified: bool = False
    json: bool = False


@dataclass
class InfoOptions:
    name: str
    json: bool = False


@dataclass
class BindOptions:
    name: str
    mount_point: str
    app_source: AppNameSource
    read_only: bool = False
    no_restart: bool = False


@dataclass
class UnbindOptions:
    name: str
    mount_point: str
    app_source: AppNameSource
    no_restart: bool = False


def volume_create(client: ApiClient, options: CreateOptions, out: Optional[IO[str]] = None) -> None:
    out = _output(out)
    form = codec.encode_volume(options.to_volume())
    response = client.request("POST", "/volumes", form=form, stream=True)
    stream_json_messages(response, out)
    out.write("Volume successfully created.\n")


def volume_update(client: ApiClient, options: CreateOptions, out: Optional[IO[str]] = None) -> None:
    out = _output(out)
    form = codec.encode_volume(options.to_volume())
    client.request("POST", _volume_path(options.name), form=form)
    out.write("Volume successfully updated.\n")


def volume_list(client: ApiClient, options: ListOptions, out: Optional[IO[str]] = None) -> None:
    """List volumes, filtered by the server and then again locally."""
    out = _output(out)
    response = client.request("GET", "/volumes", params=options.filter.query_params())
    if response.status_code == codes.NO_CONTENT:
        write_no_volumes(out)
        return
    volumes = codec.decode_list(response.content)
    volumes = options.filter.filter_all(volumes)
    render_volume_list(out, volumes, select_output_mode(options.simplified, options.json))


def volume_info(client: ApiClient, options: InfoOptions, out: Optional[IO[str]] = None) -> None:
    out = _output(out)
    response = client.request("GET", _volume_path(options.name))
    if response.status_code == codes.NO_CONTENT:
        write_no_volumes(out)
        return
    volume = codec.decode_single(response.content)
    if options.json:
        write_json(out, volume.raw)
        return
    render_volume_info(out, volume)


def volume_delete(client: ApiClient, name: str, out: Optional[IO[str]] = None) -> None:
    out = _output(out)
    client.request("DELETE", _volume_path(name))
    out.write("Volume successfully deleted.\n")


def volume_bind(client: ApiClient, options: BindOptions, out: Optional[IO[str]] = None) -> None:
    out = _output(out)
    app = options.app_source.resolve_app_name()
    form = codec.encode_bind(app, options.mount_point, options.read_only, options.no_restart)
    response = client.request("POST", _volume_path(options.name, "/bind"), form=form, stream=True)
    stream_json_messages(response, out)
    out.write("Volume successfully bound.\n")


def volume_unbind(client: ApiClient, options: UnbindOptions, out: Optional[IO[str]] = None) -> None:
    out = _output(out)
    app = options.app_source.resolve_app_name()
    params = dict(codec.encode_unbind(app, options.mount_point, options.no_restart))
    response = client.request("DELETE", _volume_path(options.name, "/bind"), params=params, stream=True)
    stream_json_messages(response, out)
    out.write("Volume successfully unbound.\n")


def volume_plan_list(client: ApiClient, out: Optional[IO[str]] = None) -> None:
    out = _output(out)
    response = client.request("GET", "/volumeplans")
    plans = codec.decode_plans(response.content, no_content=response.status_code == codes.NO_CONTENT)
    render_plan_list(out, plans)
