import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from PIL import Image

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from glyphforge_renderer import export
from glyphforge_renderer.compositor import generate_image
from glyphforge_renderer.export import pick_output_path, save_png
from glyphforge_renderer.models import GlyphConfig


class ExportTests(unittest.TestCase):
    def test_png_roundtrip_pixels(self):
        canvas = generate_image(GlyphConfig(columns=2, rows=2, color_chance=60, seed=31))
        with tempfile.TemporaryDirectory() as tmp:
            path = save_png(canvas, Path(tmp) / "nested" / "sheet.png")
            self.assertTrue(path.exists())
            with Image.open(path) as img:
                self.assertEqual(img.format, "PNG")
                self.assertEqual(img.mode, "RGB")
                self.assertEqual(img.size, (canvas.width, canvas.height))
                self.assertEqual(img.tobytes(), canvas.to_bytes())

    def test_pick_output_path_creates_dir(self):
        with tempfile.TemporaryDirectory() as tmp:
            out_dir = Path(tmp) / "output"
            path = pick_output_path(out_dir)
            self.assertTrue(out_dir.is_dir())
            self.assertEqual(path.parent, out_dir)
            self.assertEqual(path.suffix, ".png")
            self.assertTrue(0 <= int(path.stem) < 2**16)
            self.assertFalse(path.exists())

    def test_pick_output_path_skips_existing(self):
        with tempfile.TemporaryDirectory() as tmp:
            out_dir = Path(tmp)
            (out_dir / "7.png").write_bytes(b"")
            with patch.object(export._system_random, "randrange", side_effect=[7, 7, 9]):
                path = pick_output_path(out_dir)
            self.assertEqual(path, out_dir / "9.png")

    def test_pick_output_path_gives_up(self):
        with tempfile.TemporaryDirectory() as tmp:
            out_dir = Path(tmp)
            (out_dir / "1.png").write_bytes(b"")
            with patch.object(export._system_random, "randrange", return_value=1):
                with self.assertRaises(FileExistsError):
                    pick_output_path(out_dir, attempts=3)


if __name__ == "__main__":
    unittest.main()
