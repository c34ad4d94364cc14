"""Wire encoding of volume resources.

Writes (create, update, bind) go out as ``application/x-www-form-urlencoded``
bodies; reads (list, info, plan list) come back as JSON. Decoded documents are
checked against a JSON schema before being turned into models, so a malformed
response fails the command instead of rendering partially.
"""
import json
from typing import Any, Dict, List, Optional, Sequence, Tuple
from urllib.parse import urlencode

import jsonschema
from jsonschema.exceptions import best_match

from volumectl.errors import DecodeError
from volumectl.models import Volume, VolumePlan

FormPairs = List[Tuple[str, str]]

_OPTS_SCHEMA = {"type": ["object", "null"]}

PLAN_SCHEMA = {
    "type": "object",
    "properties": {
        "Name": {"type": "string"},
        "Opts": _OPTS_SCHEMA,
    },
    "required": ["Name"],
}

BIND_SCHEMA = {
    "type": "object",
    "properties": {
        "ID": {
            "type": ["object", "null"],
            "properties": {
                "App": {"type": "string"},
                "MountPoint": {"type": "string"},
            },
        },
        "ReadOnly": {"type": ["boolean", "null"]},
    },
}

VOLUME_SCHEMA = {
    "type": "object",
    "properties": {
        "Name": {"type": "string"},
        "Pool": {"type": ["string", "null"]},
        "TeamOwner": {"type": ["string", "null"]},
        "Status": {"type": ["string", "null"]},
        "Plan": {
            "type": ["object", "null"],
            "properties": {
                "Name": {"type": ["string", "null"]},
                "Opts": _OPTS_SCHEMA,
            },
        },
        "Opts": _OPTS_SCHEMA,
        "Binds": {"type": ["array", "null"], "items": BIND_SCHEMA},
    },
    "required": ["Name"],
}

VOLUME_LIST_SCHEMA = {"type": ["array", "null"], "items": VOLUME_SCHEMA}

PLANS_SCHEMA = {
    "type": ["object", "null"],
    "additionalProperties": {"type": ["array", "null"], "items": PLAN_SCHEMA},
}


def _bool(value: bool) -> str:
    return "true" if value else "false"


def encode_volume(volume: Volume) -> FormPairs:
    """Encode a volume for create/update.

    ``Pool`` and ``TeamOwner`` are left out when empty so the server treats
    them as unset. Each option becomes its own ``Opts.<key>`` field.
    """
    pairs = [("Name", volume.name), ("Plan.Name", volume.plan.name)]
    if volume.pool:
        pairs.append(("Pool", volume.pool))
    if volume.team_owner:
        pairs.append(("TeamOwner", volume.team_owner))
    for key in sorted(volume.opts):
        pairs.append((f"Opts.{key}", volume.opts[key]))
    return pairs


def encode_bind(app: str, mount_point: str, read_only: bool, no_restart: bool) -> FormPairs:
    return [
        ("App", app),
        ("MountPoint", mount_point),
        ("ReadOnly", _bool(read_only)),
        ("NoRestart", _bool(no_restart)),
    ]


def encode_unbind(app: str, mount_point: str, no_restart: bool) -> FormPairs:
    return [
        ("App", app),
        ("MountPoint", mount_point),
        ("NoRestart", _bool(no_restart)),
    ]


def form_body(pairs: Sequence[Tuple[str, str]]) -> str:
    return urlencode(list(pairs))


def _load_json(body: bytes, schema: Dict[str, Any], what: str) -> Any:
    try:
        data = json.loads(body)
    except ValueError as e:
        raise DecodeError(f"Invalid JSON in {what} response: {e}") from e
    validator = jsonschema.Draft202012Validator(schema)
    error = best_match(validator.iter_errors(data))
    if error is not None:
        location = "/".join(str(p) for p in error.absolute_path) or "<root>"
        raise DecodeError(f"Unexpected {what} response at {location}: {error.message}")
    return data


def decode_list(body: bytes, no_content: bool = False) -> List[Volume]:
    """Decode a volume list. A 204 response is an empty list."""
    if no_content:
        return []
    data = _load_json(body, VOLUME_LIST_SCHEMA, "volume list")
    return [Volume.from_dict(item) for item in data or []]


def decode_single(body: bytes) -> Volume:
    data = _load_json(body, VOLUME_SCHEMA, "volume")
    return Volume.from_dict(data)


def decode_plans(body: bytes, no_content: bool = False) -> Dict[str, List[VolumePlan]]:
    """Decode plans grouped by provisioner. A 204 response is an empty mapping."""
    if no_content:
        return {}
    data: Optional[Dict[str, Any]] = _load_json(body, PLANS_SCHEMA, "volume plan list")
    return {
        provisioner: [VolumePlan.from_dict(p) for p in plans or []]
        for provisioner, plans in (data or {}).items()
    }
