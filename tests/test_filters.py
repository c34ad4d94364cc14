"""
Unit tests for volume filters.
"""

import unittest

from volumectl.filters import VolumeFilter
from volumectl.models import Volume, VolumePlan


def make_volume(name, pool="", plan="", team=""):
    return Volume(name=name, pool=pool, plan=VolumePlan(name=plan), team_owner=team)


class TestVolumeFilter(unittest.TestCase):
    """Test the client side predicate and the query parameters."""

    def setUp(self):
        self.volumes = [
            make_volume("data1", pool="p1", plan="nfs", team="t1"),
            make_volume("data2", pool="p2", plan="nfs", team="t2"),
            make_volume("logs", pool="p1", plan="ebs", team="t2"),
        ]

    def test_empty_filter_matches_everything(self):
        f = VolumeFilter()
        for volume in self.volumes:
            self.assertTrue(f.matches(volume))
        self.assertEqual(f.filter_all(self.volumes), self.volumes)

    def test_name_is_substring(self):
        f = VolumeFilter(name="ata")
        self.assertTrue(f.matches(self.volumes[0]))
        self.assertFalse(f.matches(self.volumes[2]))

    def test_name_is_case_sensitive(self):
        self.assertFalse(VolumeFilter(name="DATA").matches(self.volumes[0]))

    def test_pool_is_exact(self):
        self.assertTrue(VolumeFilter(pool="p1").matches(self.volumes[0]))
        self.assertFalse(VolumeFilter(pool="p").matches(self.volumes[0]))
        self.assertFalse(VolumeFilter(pool="p2").matches(self.volumes[0]))

    def test_plan_is_exact(self):
        self.assertTrue(VolumeFilter(plan="ebs").matches(self.volumes[2]))
        self.assertFalse(VolumeFilter(plan="nf").matches(self.volumes[0]))

    def test_team_is_exact(self):
        self.assertTrue(VolumeFilter(team_owner="t2").matches(self.volumes[1]))
        self.assertFalse(VolumeFilter(team_owner="t2").matches(self.volumes[0]))

    def test_all_criteria_are_anded(self):
        f = VolumeFilter(name="data", pool="p1", plan="nfs", team_owner="t1")
        self.assertTrue(f.matches(self.volumes[0]))
        f = VolumeFilter(name="data", pool="p1", plan="nfs", team_owner="t2")
        self.assertFalse(f.matches(self.volumes[0]))

    def test_filter_by_pool_scenario(self):
        names = [v.name for v in VolumeFilter(pool="p1").filter_all(self.volumes[:2])]
        self.assertEqual(names, ["data1"])

    def test_filter_all_preserves_order(self):
        volumes = list(reversed(self.volumes))
        result = VolumeFilter(pool="p1").filter_all(volumes)
        self.assertEqual([v.name for v in result], ["logs", "data1"])

    def test_query_params_only_non_empty(self):
        self.assertEqual(VolumeFilter().query_params(), {})
        params = VolumeFilter(name="data", team_owner="t1").query_params()
        self.assertEqual(params, {"name": "data", "teamOwner": "t1"})

    def test_query_params_key_order(self):
        params = VolumeFilter(name="n", pool="p", plan="x", team_owner="t").query_params()
        self.assertEqual(list(params), ["name", "plan", "pool", "teamOwner"])


if __name__ == "__main__":
    unittest.main()
