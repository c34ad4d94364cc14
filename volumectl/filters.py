"""Volume list filtering.

Filters are sent to the server as query parameters and then applied again to
the returned volumes. The server side filter is best effort (it may ignore a
field or match names differently), the local predicate is authoritative.
"""
from dataclasses import dataclass
from typing import Dict, Iterable, List

from volumectl.models import Volume


@dataclass
class VolumeFilter:
    """
    Criteria for ``volume list``. Empty fields do not constrain.

    Args:
        name (str): Substring of the volume name (case sensitive).
        pool (str): Exact pool.
        plan (str): Exact plan name.
        team_owner (str): Exact owner team.
    """
    name: str = ""
    pool: str = ""
    plan: str = ""
    team_owner: str = ""

    def query_params(self) -> Dict[str, str]:
        """Non-empty criteria keyed by API parameter name, in key order."""
        params = {
            "name": self.name,
            "plan": self.plan,
            "pool": self.pool,
            "teamOwner": self.team_owner,
        }
        return {k: v for k, v in params.items() if v}

    def matches(self, volume: Volume) -> bool:
        if self.name and self.name not in volume.name:
            return False
        if self.pool and volume.pool != self.pool:
            return False
        if self.plan and volume.plan.name != self.plan:
            return False
        if self.team_owner and volume.team_owner != self.team_owner:
            return False
        return True

    def filter_all(self, volumes: Iterable[Volume]) -> List[Volume]:
        return [v for v in volumes if self.matches(v)]
