"""Output rendering for volume commands."""
import enum
import json
from typing import IO, Any, Dict, List, Optional, Sequence, Tuple

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from volumectl.const import NO_VOLUMES_MESSAGE
from volumectl.models import Volume, VolumePlan

volumectl_theme = Theme({
    "header": "bold #2563EB",
    "error": "#F59E0B bold",
})

Row = Tuple[str, ...]

VOLUME_HEADERS = ("Name", "Plan", "Pool", "Team")
PLAN_HEADERS = ("Plan", "Provisioner", "Opts")
BIND_HEADERS = ("App", "MountPoint", "Mode")
OPTS_HEADERS = ("Key", "Value")


class OutputMode(enum.Enum):
    SIMPLIFIED = "simplified"
    JSON = "json"
    TABLE = "table"


def select_output_mode(simplified: bool, as_json: bool) -> OutputMode:
    """Pick the output mode. Name-only beats JSON, JSON beats the table."""
    for enabled, mode in ((simplified, OutputMode.SIMPLIFIED), (as_json, OutputMode.JSON)):
        if enabled:
            return mode
    return OutputMode.TABLE


def make_console(out: IO[str]) -> Console:
    return Console(file=out, theme=volumectl_theme, highlight=False)


def format_value(value: Any) -> str:
    """Render an option value the way the API prints it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        return json.dumps(value, sort_keys=True)
    return str(value)


def sort_rows(rows: Sequence[Row], columns: Optional[Sequence[int]] = None) -> List[Row]:
    """Sort rows lexicographically by ``columns``, or by every column in order."""
    if columns is None:
        return sorted(rows)
    return sorted(rows, key=lambda row: tuple(row[c] for c in columns))


def build_table(headers: Sequence[str], rows: Sequence[Row]) -> Table:
    table = Table(
        box=box.SQUARE,
        show_header=True,
        header_style="header",
        show_lines=True,
    )
    for header in headers:
        table.add_column(header, overflow="fold")
    for row in rows:
        # Cells are data, never console markup.
        table.add_row(*(Text(cell) for cell in row))
    return table


def write_no_volumes(out: IO[str]) -> None:
    out.write(NO_VOLUMES_MESSAGE + "\n")


def write_json(out: IO[str], data: Any) -> None:
    out.write(json.dumps(data, indent=2) + "\n")


def volume_rows(volumes: Sequence[Volume]) -> List[Row]:
    rows = [(v.name, v.plan.name, v.pool, v.team_owner) for v in volumes]
    return sort_rows(rows)


def render_volume_list(out: IO[str], volumes: Sequence[Volume], mode: OutputMode) -> None:
    if mode is OutputMode.SIMPLIFIED:
        for volume in volumes:
            out.write(volume.name + "\n")
        return
    if mode is OutputMode.JSON:
        write_json(out, [v.raw or v.to_dict() for v in volumes])
        return
    make_console(out).print(build_table(VOLUME_HEADERS, volume_rows(volumes)))


def opts_rows(opts: Dict[str, Any]) -> List[Row]:
    return sort_rows([(k, format_value(v)) for k, v in opts.items()])


def render_volume_info(out: IO[str], volume: Volume) -> None:
    """Render a single volume: summary fields, then binds, plan opts and opts."""
    out.write(
        f"Name: {volume.name}\n"
        f"Plan: {volume.plan.name}\n"
        f"Pool: {volume.pool}\n"
        f"Team: {volume.team_owner}\n"
    )
    console = make_console(out)
    bind_rows = [(b.app, b.mount_point, b.mode) for b in volume.binds]
    out.write("\nBinds:\n")
    console.print(build_table(BIND_HEADERS, bind_rows))
    out.write("\nPlan Opts:\n")
    console.print(build_table(OPTS_HEADERS, opts_rows(volume.plan.opts)))
    out.write("\nOpts:\n")
    console.print(build_table(OPTS_HEADERS, opts_rows(volume.opts)))


def plan_rows(plans: Dict[str, List[VolumePlan]]) -> List[Row]:
    """One row per (plan, provisioner), sorted by plan then provisioner."""
    rows = []
    for provisioner, provisioner_plans in plans.items():
        for plan in provisioner_plans:
            opts = sorted(f"{k}: {format_value(v)}" for k, v in plan.opts.items())
            rows.append((plan.name, provisioner, "\n".join(opts)))
    return sort_rows(rows, columns=(0, 1))


def render_plan_list(out: IO[str], plans: Dict[str, List[VolumePlan]]) -> None:
    make_console(out).print(build_table(PLAN_HEADERS, plan_rows(plans)))
