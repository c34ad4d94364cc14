"""Volume resources as returned by the API."""
from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class VolumePlan:
    """A named volume template with provisioner specific options."""
    name: str = ""
    opts: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "VolumePlan":
        return cls(name=data.get("Name") or "", opts=dict(data.get("Opts") or {}))


@dataclass
class VolumeBind:
    """Attachment of a volume to an app at a mount point."""
    app: str = ""
    mount_point: str = ""
    read_only: bool = False

    @property
    def mode(self) -> str:
        return "ro" if self.read_only else "rw"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "VolumeBind":
        # The API nests the bind identity under "ID"; accept the flat form too.
        ident = data.get("ID") or data
        return cls(
            app=ident.get("App") or "",
            mount_point=ident.get("MountPoint") or "",
            read_only=bool(data.get("ReadOnly", False)),
        )


@dataclass
class Volume:
    """
    A persistent volume.

    Args:
        name (str): Volume name, unique on the server.
        plan (VolumePlan): The plan the volume was created from.
        pool (str): Pool owning the volume, empty when unset.
        team_owner (str): Team owning the volume, empty when unset.
        opts (dict): Backend specific options.
        binds (list): Current binds of the volume.
        status (str): Status reported by the server.
        raw (dict): The decoded JSON object this volume was built from.
    """
    name: str
    plan: VolumePlan = field(default_factory=VolumePlan)
    pool: str = ""
    team_owner: str = ""
    opts: Dict[str, str] = field(default_factory=dict)
    binds: List[VolumeBind] = field(default_factory=list)
    status: str = ""
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Volume":
        return cls(
            name=data.get("Name") or "",
            plan=VolumePlan.from_dict(data.get("Plan") or {}),
            pool=data.get("Pool") or "",
            team_owner=data.get("TeamOwner") or "",
            opts={k: "" if v is None else str(v) for k, v in (data.get("Opts") or {}).items()},
            binds=[VolumeBind.from_dict(b) for b in data.get("Binds") or []],
            status=data.get("Status") or "",
            raw=data,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Wire representation of the volume, as the API serializes it."""
        return {
            "Name": self.name,
            "Pool": self.pool,
            "Plan": {"Name": self.plan.name, "Opts": dict(self.plan.opts)},
            "TeamOwner": self.team_owner,
            "Status": self.status,
            "Binds": [
                {
                    "ID": {"App": b.app, "MountPoint": b.mount_point, "Volume": self.name},
                    "ReadOnly": b.read_only,
                }
                for b in self.binds
            ],
            "Opts": dict(self.opts),
        }
