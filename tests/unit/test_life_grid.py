import random
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))
sys.path.insert(0, str(ROOT / "packages" / "simulation"))

from lifeview_renderer.framebuffer import Framebuffer
from lifeview_sim.grid import LifeGrid
from lifeview_sim.models import InvalidSeedError, SeedPolicy


def shifted(cells, dx, dy, width, height):
    return {((x + dx) % width, (y + dy) % height) for x, y in cells}


class LifeGridRuleTests(unittest.TestCase):
    def test_rejects_empty_dimensions(self):
        with self.assertRaises(ValueError):
            LifeGrid(0, 5)
        with self.assertRaises(ValueError):
            LifeGrid(5, -1)

    def test_step_preserves_dimensions(self):
        grid = LifeGrid(7, 5, [(1, 1), (2, 1), (3, 1)])
        grid.step()
        self.assertEqual((grid.width, grid.height), (7, 5))
        self.assertEqual(grid.cells.size, 35)
        self.assertEqual(grid.generation, 1)

    def test_isolated_cell_dies(self):
        grid = LifeGrid(5, 5, [(2, 2)])
        grid.step()
        self.assertEqual(grid.population, 0)

    def test_survival_and_overcrowding(self):
        # Center (2, 2) has 4 neighbors and dies; corners of the plus survive or die per count.
        grid = LifeGrid(7, 7, [(2, 2), (1, 2), (3, 2), (2, 1), (2, 3)])
        self.assertEqual(grid.count_neighbors(2, 2), 4)
        grid.step()
        self.assertFalse(grid.is_alive(2, 2))
        self.assertTrue(grid.is_alive(1, 2))

    def test_birth_with_exactly_three(self):
        grid = LifeGrid(6, 6, [(1, 1), (2, 1), (3, 1)])
        self.assertEqual(grid.count_neighbors(2, 0), 3)
        grid.step()
        self.assertTrue(grid.is_alive(2, 0))
        self.assertTrue(grid.is_alive(2, 2))

    def test_step_matches_snapshot_rule(self):
        rng = random.Random(7)
        width, height = 12, 9
        seeds = [(x, y) for y in range(height) for x in range(width) if rng.random() < 0.35]
        grid = LifeGrid(width, height, seeds)

        expected = set()
        for y in range(height):
            for x in range(width):
                n = grid.count_neighbors(x, y)
                alive = grid.is_alive(x, y)
                if (alive and n in (2, 3)) or (not alive and n == 3):
                    expected.add((x, y))

        grid.step()
        self.assertEqual(set(grid.live_cells()), expected)

    def test_step_does_not_touch_previous_cells_copy(self):
        grid = LifeGrid(5, 5, [(1, 2), (2, 2), (3, 2)])
        before = grid.cells
        grid.step()
        self.assertEqual(int(before.sum()), 3)
        self.assertTrue(before[grid.index(1, 2)])


class ToroidalTests(unittest.TestCase):
    def test_corner_neighbor_wraps_on_3x3(self):
        grid = LifeGrid(3, 3, [(2, 2)])
        self.assertEqual(grid.count_neighbors(0, 0), 1)
        self.assertTrue(grid.is_alive(-1, -1))

    def test_every_cell_has_eight_neighbors(self):
        width, height = 4, 4
        everything = [(x, y) for y in range(height) for x in range(width)]
        grid = LifeGrid(width, height, everything)
        for x, y in everything:
            self.assertEqual(grid.count_neighbors(x, y), 8)

    def test_blinker_across_edge(self):
        grid = LifeGrid(10, 10, [(9, 5), (0, 5), (1, 5)])
        grid.step()
        self.assertEqual(set(grid.live_cells()), {(0, 4), (0, 5), (0, 6)})

    def test_glider_wraps_home(self):
        start = {(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)}
        grid = LifeGrid(8, 8, start)
        for _ in range(32):
            grid.step()
        self.assertEqual(set(grid.live_cells()), start)


class PatternBehaviourTests(unittest.TestCase):
    def test_block_is_still(self):
        block = {(4, 4), (5, 4), (4, 5), (5, 5)}
        grid = LifeGrid(10, 10, block)
        for _ in range(5):
            grid.step()
            self.assertEqual(set(grid.live_cells()), block)

    def test_blinker_period_two(self):
        vertical = {(5, 4), (5, 5), (5, 6)}
        horizontal = {(4, 5), (5, 5), (6, 5)}
        grid = LifeGrid(10, 10, vertical)
        grid.step()
        self.assertEqual(set(grid.live_cells()), horizontal)
        grid.step()
        self.assertEqual(set(grid.live_cells()), vertical)

    def test_glider_translates_after_four_steps(self):
        glider = {(1, 2), (2, 2), (3, 2), (3, 1), (2, 0)}
        grid = LifeGrid(10, 10, glider)
        for _ in range(4):
            grid.step()
        self.assertEqual(set(grid.live_cells()), shifted(glider, 1, 1, 10, 10))
        self.assertEqual(grid.population, 5)


class SeedPolicyTests(unittest.TestCase):
    def test_duplicates_are_idempotent(self):
        grid = LifeGrid(4, 4, [(1, 1), (1, 1), (1, 1)])
        self.assertEqual(grid.population, 1)

    def test_wrap_policy_maps_onto_torus(self):
        grid = LifeGrid(5, 5, [(5, 0), (-1, -1), (12, 7)], seed_policy=SeedPolicy.WRAP)
        self.assertEqual(set(grid.live_cells()), {(0, 0), (4, 4), (2, 2)})

    def test_reject_policy_raises_before_seeding(self):
        with self.assertRaises(InvalidSeedError) as ctx:
            LifeGrid(5, 5, [(1, 1), (5, 0)], seed_policy="reject")
        self.assertEqual((ctx.exception.x, ctx.exception.y), (5, 0))
        self.assertIsInstance(ctx.exception, ValueError)

    def test_unknown_policy(self):
        with self.assertRaises(ValueError):
            LifeGrid(5, 5, [], seed_policy="clamp")


class RenderTests(unittest.TestCase):
    def test_render_clears_then_draws_live_cells(self):
        grid = LifeGrid(4, 3, [(0, 0), (3, 2)])
        fb = Framebuffer(4, 3)
        fb.set_background_color(0x111111)
        fb.set_current_color(0xEEEEEE)
        fb.point(1, 1)

        grid.render(fb)

        self.assertEqual(fb.get_pixel(0, 0), 0xEEEEEE)
        self.assertEqual(fb.get_pixel(3, 2), 0xEEEEEE)
        self.assertEqual(fb.get_pixel(1, 1), 0x111111)
        self.assertEqual(int((fb.buffer == 0xEEEEEE).sum()), 2)

    def test_cells_outside_framebuffer_are_dropped(self):
        grid = LifeGrid(10, 10, [(1, 1), (8, 8)])
        fb = Framebuffer(4, 4)
        grid.render(fb)
        self.assertEqual(len(fb), 16)
        self.assertEqual(int((fb.buffer == 0xFFFFFF).sum()), 1)


if __name__ == "__main__":
    unittest.main()
