import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "simulation"))

from lifeview_sim.grid import LifeGrid
from lifeview_sim.models import PatternKind, SeedPolicy
from lifeview_sim.patterns import SCENES, get_pattern, list_patterns, list_scenes, place, scene_cells


def run(cells, width, height, steps):
    grid = LifeGrid(width, height, cells)
    for _ in range(steps):
        grid.step()
    return set(grid.live_cells())


class PatternTableTests(unittest.TestCase):
    def test_cell_counts(self):
        expected = {
            "block": 4,
            "beehive": 6,
            "blinker": 3,
            "glider": 5,
            "lwss": 9,
            "mwss": 11,
            "hwss": 13,
            "pulsar": 48,
            "gosper_glider_gun": 36,
        }
        for name, count in expected.items():
            self.assertEqual(len(get_pattern(name).cells), count, name)

    def test_dimensions(self):
        self.assertEqual((get_pattern("pulsar").width, get_pattern("pulsar").height), (13, 13))
        self.assertEqual((get_pattern("gosper_glider_gun").width, get_pattern("gosper_glider_gun").height), (36, 9))

    def test_unknown_pattern(self):
        with self.assertRaises(KeyError):
            get_pattern("nope")

    def test_place_offsets(self):
        self.assertEqual(sorted(place("block", 10, 20)), [(10, 20), (10, 21), (11, 20), (11, 21)])

    def test_list_sorted(self):
        self.assertEqual(list_patterns(), sorted(list_patterns()))
        self.assertIn("showcase", list_scenes())


class PatternBehaviourTests(unittest.TestCase):
    def test_still_lifes_do_not_change(self):
        for name in list_patterns():
            if get_pattern(name).kind != PatternKind.STILL_LIFE:
                continue
            cells = set(place(name, 4, 4))
            self.assertEqual(run(cells, 12, 12, 3), cells, name)

    def test_oscillator_periods(self):
        periods = {"blinker": 2, "toad": 2, "beacon": 2, "pulsar": 3}
        for name, period in periods.items():
            cells = set(place(name, 5, 5))
            after_one = run(cells, 24, 24, 1)
            self.assertNotEqual(after_one, cells, name)
            self.assertEqual(run(cells, 24, 24, period), cells, name)

    def test_lwss_moves_two_cells_per_four_generations(self):
        cells = set(place("lwss", 10, 10))
        after = run(cells, 30, 30, 4)
        candidates = [{(x + dx, y) for x, y in cells} for dx in (-2, 2)]
        self.assertIn(after, candidates)


class SceneTests(unittest.TestCase):
    def test_scenes_fit_default_grid(self):
        for name in SCENES:
            for x, y in scene_cells(name):
                self.assertTrue(0 <= x < 80 and 0 <= y < 60, (name, x, y))
            LifeGrid(80, 60, scene_cells(name), seed_policy=SeedPolicy.REJECT)

    def test_showcase_placements_do_not_overlap(self):
        cells = scene_cells("showcase")
        self.assertEqual(len(cells), len(set(cells)))

    def test_default_scene(self):
        self.assertEqual(scene_cells(None), scene_cells("showcase"))

    def test_unknown_scene(self):
        with self.assertRaises(KeyError):
            scene_cells("nope")


if __name__ == "__main__":
    unittest.main()
