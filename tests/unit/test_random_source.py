import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from glyphforge_renderer.errors import InvalidConfiguration
from glyphforge_renderer.random_source import RandomSource


class RandomSourceTests(unittest.TestCase):
    def test_same_seed_same_sequence(self):
        a = RandomSource(1234)
        b = RandomSource(1234)
        seq_a = [a.uniform_index(7) for _ in range(50)] + [a.uniform_percent() for _ in range(50)]
        seq_b = [b.uniform_index(7) for _ in range(50)] + [b.uniform_percent() for _ in range(50)]
        self.assertEqual(seq_a, seq_b)

    def test_different_seeds_diverge(self):
        a = RandomSource(1)
        b = RandomSource(2)
        self.assertNotEqual([a.uniform_byte() for _ in range(32)], [b.uniform_byte() for _ in range(32)])

    def test_ranges(self):
        src = RandomSource(99)
        for _ in range(500):
            self.assertTrue(0 <= src.uniform_index(3) < 3)
            self.assertTrue(0 <= src.uniform_percent() < 100)
            self.assertTrue(0 <= src.uniform_byte() < 256)

    def test_single_value_range(self):
        src = RandomSource(5)
        self.assertEqual({src.uniform_index(1) for _ in range(20)}, {0})

    def test_empty_range_rejected(self):
        src = RandomSource(5)
        with self.assertRaises(InvalidConfiguration):
            src.uniform_index(0)

    def test_seed_bounds(self):
        RandomSource(0)
        RandomSource(2**64 - 1)
        with self.assertRaises(InvalidConfiguration):
            RandomSource(-1)
        with self.assertRaises(InvalidConfiguration):
            RandomSource(2**64)

    def test_entropy_source_exposes_replayable_seed(self):
        src = RandomSource.from_entropy()
        self.assertTrue(0 <= src.seed < 2**64)
        replay = RandomSource(src.seed)
        self.assertEqual([src.uniform_percent() for _ in range(10)], [replay.uniform_percent() for _ in range(10)])

    def test_optional_seed(self):
        self.assertEqual(RandomSource.from_optional_seed(77).seed, 77)
        self.assertIsInstance(RandomSource.from_optional_seed(None).seed, int)


if __name__ == "__main__":
    unittest.main()
