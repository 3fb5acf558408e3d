import tempfile
import unittest
from pathlib import Path

from repdecimal import DEFAULT_MAGNITUDE_BITS, DisplayConfig, load_config


class DisplayConfigTests(unittest.TestCase):
    def setUp(self):
        self._tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmpdir.cleanup)
        self.tmp = Path(self._tmpdir.name)

    def _write(self, text):
        path = self.tmp / "display.toml"
        path.write_text(text)
        return path

    def test_defaults(self):
        config = DisplayConfig()
        self.assertEqual(config.style, "parentheses")
        self.assertEqual(config.digits, 20)
        self.assertEqual(config.bits, DEFAULT_MAGNITUDE_BITS)

    def test_load_top_level_keys(self):
        config = load_config(self._write('style = "brackets"\ndigits = 8\n'))
        self.assertEqual(config, DisplayConfig(style="brackets", digits=8))

    def test_load_section(self):
        config = load_config(self._write('[repdecimal]\nstyle = "overline"\nbits = 32\n'))
        self.assertEqual(config.style, "overline")
        self.assertEqual(config.bits, 32)

    def test_top_level_keys_beside_section_rejected(self):
        with self.assertRaises(ValueError):
            load_config(self._write('digits = 5\n[repdecimal]\nstyle = "brackets"\n'))

    def test_section_must_be_table(self):
        with self.assertRaises(ValueError):
            load_config(self._write('repdecimal = "brackets"\n'))

    def test_unknown_keys_rejected(self):
        with self.assertRaises(ValueError):
            load_config(self._write("precision = 3\n"))

    def test_invalid_values_rejected(self):
        with self.assertRaises(ValueError):
            DisplayConfig(style="underline")
        with self.assertRaises(ValueError):
            DisplayConfig(digits=-1)
        with self.assertRaises(ValueError):
            DisplayConfig(bits=0)
        with self.assertRaises(ValueError):
            load_config(self._write('digits = "ten"\n'))

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_config(self.tmp / "absent.toml")

    def test_replace_skips_none(self):
        config = DisplayConfig(style="brackets").replace(style=None, digits=4)
        self.assertEqual(config, DisplayConfig(style="brackets", digits=4))


if __name__ == "__main__":  # pragma: no cover - direct execution helper
    unittest.main()
