#!/usr/bin/env python3
# Test Command-Line Interface

import unittest
import json
import logging
import sys
import os
import tempfile
from pathlib import Path

from click.testing import CliRunner

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from hutupy.cli import cli
from hutupy.utils.logging import package_loggers

def _reset_package_logging():
    """Drop file handlers and restore the default level on package loggers."""
    for log in package_loggers():
        for handler in list(log.handlers):
            if isinstance(handler, logging.FileHandler):
                handler.close()
                log.removeHandler(handler)
        log.setLevel(logging.INFO)

class TestCLI(unittest.TestCase):

    def setUp(self):
        """Set up CLI runner."""
        self.runner = CliRunner()

    def test_reformat(self):
        """Test reformatting."""
        result = self.runner.invoke(cli, ['reformat', '2023-04-01 12:00:00', '--to', '%F'])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.output.strip(), '2023-04-01')

    def test_reformat_unparseable(self):
        """Test reformat with unparseable input."""
        result = self.runner.invoke(cli, ['reformat', 'yesterday', '--to', '%F'])
        self.assertEqual(result.exit_code, 1)

    def test_hex_round_trip(self):
        """Test hex-encode and hex-decode."""
        encoded = self.runner.invoke(cli, ['hex-encode', 'hello, world!'])
        self.assertEqual(encoded.output.strip(), '68656c6c6f2c20776f726c6421')

        decoded = self.runner.invoke(cli, ['hex-decode', encoded.output.strip()])
        self.assertEqual(decoded.output.strip(), 'hello, world!')

    def test_hex_decode_invalid(self):
        """Test hex-decode with invalid input."""
        result = self.runner.invoke(cli, ['hex-decode', 'xyz'])
        self.assertEqual(result.exit_code, 1)

    def test_paginate(self):
        """Test paginate output."""
        result = self.runner.invoke(
            cli, ['paginate', '--total', '200', '--page', '5', '--size', '10', '--display', '6']
        )
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn('Total pages: 20', result.output)
        self.assertIn('Range: [40, 50)', result.output)
        self.assertIn('Pager: [3, 4, 5, 6, 7, 8]', result.output)

    def test_stats_writes_output(self):
        """Test stats writes a JSON file."""
        with tempfile.TemporaryDirectory() as tmp:
            output = Path(tmp) / 'stats.json'
            result = self.runner.invoke(cli, ['stats', '1', '2', '3', '4', '5', '-o', str(output)])
            self.assertEqual(result.exit_code, 0, result.output)

            with open(output) as f:
                saved = json.load(f)

        self.assertEqual(saved['count'], 5)
        self.assertAlmostEqual(saved['variance'], 2.0)
        self.assertAlmostEqual(saved['sample_standard_deviation'], 1.5811, places=4)

    def test_ls(self):
        """Test directory listing."""
        with tempfile.TemporaryDirectory() as tmp:
            Path(tmp, 'file.txt').write_text('x')
            Path(tmp, 'folder').mkdir()
            result = self.runner.invoke(cli, ['ls', tmp])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.output.split(), ['file.txt', 'folder/'])

    def test_ls_missing_directory(self):
        """Test ls on a missing directory."""
        result = self.runner.invoke(cli, ['ls', '/definitely/not/here'])
        self.assertEqual(result.exit_code, 1)

    def test_config_sets_defaults(self):
        """Test config supplies command defaults."""
        with tempfile.TemporaryDirectory() as tmp:
            config = Path(tmp) / 'settings.yaml'
            config.write_text("datetime_format: '%Y/%m/%d'\npage_size: 3\n")

            reformatted = self.runner.invoke(
                cli, ['--config', str(config), 'reformat', '2023/04/01', '--to', '%F']
            )
            paged = self.runner.invoke(cli, ['--config', str(config), 'paginate', '--total', '10'])

        self.assertEqual(reformatted.output.strip(), '2023-04-01')
        self.assertIn('Total pages: 4', paged.output)

    def test_missing_config(self):
        """Test missing config file."""
        result = self.runner.invoke(cli, ['--config', '/no/such/file.yaml', 'demo'])
        self.assertEqual(result.exit_code, 1)

    def test_paginate_rejects_zero_size(self):
        """Test paginate with a zero page size."""
        result = self.runner.invoke(cli, ['paginate', '--total', '10', '--size', '0'])
        self.assertEqual(result.exit_code, 1)
        self.assertNotIn('Total pages', result.output)

    def test_paginate_rejects_zero_display(self):
        """Test paginate with a zero display count."""
        result = self.runner.invoke(cli, ['paginate', '--total', '10', '--display', '0'])
        self.assertEqual(result.exit_code, 1)

    def test_bad_config_values_exit_cleanly(self):
        """Test invalid config values fail with an error message."""
        bad_configs = {
            'level.yaml': "log_level: verbose\n",
            'size.yaml': "page_size: ten\n",
            'display.yaml': "rainbow_display_count: 2.5\n",
        }
        with tempfile.TemporaryDirectory() as tmp:
            for name, text in bad_configs.items():
                with self.subTest(config=name):
                    config = Path(tmp) / name
                    config.write_text(text)
                    result = self.runner.invoke(cli, ['--config', str(config), 'demo'])

                    self.assertEqual(result.exit_code, 1)
                    self.assertIsInstance(result.exception, SystemExit)

    def test_config_logging_reaches_every_module(self):
        """Test config log settings apply to all package loggers."""
        with tempfile.TemporaryDirectory() as tmp:
            log_file = Path(tmp) / 'logs' / 'hutupy.log'
            config = Path(tmp) / 'settings.yaml'
            config.write_text(f"log_level: DEBUG\nlog_file: '{log_file}'\n")
            output = Path(tmp) / 'stats.json'
            try:
                result = self.runner.invoke(
                    cli, ['--config', str(config), 'stats', '1', '2', '-o', str(output)]
                )
                self.assertEqual(result.exit_code, 0, result.output)
                self.assertIn('hutupy_io - DEBUG', log_file.read_text())
            finally:
                _reset_package_logging()

    def test_now_and_demo(self):
        """Test now and demo commands."""
        now = self.runner.invoke(cli, ['now', '--format', '%F'])
        self.assertEqual(now.exit_code, 0, now.output)
        self.assertIn('timestamp:', now.output)

        demo = self.runner.invoke(cli, ['demo'])
        self.assertEqual(demo.exit_code, 0, demo.output)
        self.assertIn('Reformatted: 2023-04-01', demo.output)
        self.assertIn('Demo completed in', demo.output)

if __name__ == '__main__':
    unittest.main()
