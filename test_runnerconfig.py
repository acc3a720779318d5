import json
import pathlib
import sys
import tempfile
import unittest
from unittest import mock

import runnerconfig
from runnerconfig import ConfigError, find_config_file, load_config

class ConfigTestCase(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.dirpath = pathlib.Path(self.tmpdir.name)

    def tearDown(self):
        self.tmpdir.cleanup()

    def write_config(self, relpath, contents):
        filepath = self.dirpath / relpath
        filepath.parent.mkdir(parents=True, exist_ok=True)
        if not isinstance(contents, str):
            contents = json.dumps(contents)
        filepath.write_text(contents, encoding="utf-8")
        return filepath

class TestFindConfigFile(ConfigTestCase):
    def test_first_existing_wins(self):
        missing = self.dirpath / "cwd" / "config.json"
        exe_config = self.write_config("exe/config.json", {})
        bundled_config = self.write_config("bundled/config.json", {})
        self.assertEqual(find_config_file([missing, exe_config, bundled_config]), exe_config)

    def test_none_exist(self):
        self.assertIsNone(find_config_file([self.dirpath / "a.json", self.dirpath / "b.json"]))

    def test_directory_is_not_a_config(self):
        (self.dirpath / "config.json").mkdir()
        self.assertIsNone(find_config_file([self.dirpath / "config.json"]))

class TestDefaultConfigCandidates(ConfigTestCase):
    def test_script_order(self):
        cwd = self.dirpath / "cwd"
        with mock.patch.object(sys, "frozen", False, create=True):
            candidates = runnerconfig.default_config_candidates(cwd)

        module_dirpath = pathlib.Path(runnerconfig.__file__).resolve().parent
        self.assertEqual(candidates, [cwd / "config.json", module_dirpath / "config.json"])

    def test_frozen_order(self):
        cwd = self.dirpath / "cwd"
        exe_dirpath = (self.dirpath / "exe").resolve()
        bundle_dirpath = self.dirpath / "bundle"
        with mock.patch.object(sys, "frozen", True, create=True), \
                mock.patch.object(sys, "executable", str(exe_dirpath / "mcsrrunnerinfo")), \
                mock.patch.object(sys, "_MEIPASS", str(bundle_dirpath), create=True):
            candidates = runnerconfig.default_config_candidates(cwd)

        self.assertEqual(candidates, [
            cwd / "config.json",
            exe_dirpath / "config.json",
            bundle_dirpath / "config.json",
        ])

    def test_frozen_output_dir_is_executable_dir(self):
        exe_dirpath = (self.dirpath / "exe").resolve()
        with mock.patch.object(sys, "frozen", True, create=True), \
                mock.patch.object(sys, "executable", str(exe_dirpath / "mcsrrunnerinfo")):
            self.assertEqual(runnerconfig.default_output_dirpath(), exe_dirpath)

    def test_working_directory_wins(self):
        cwd_config = self.write_config("cwd/config.json", {"runner1": "Alice", "runner2": "Bob", "currentSeasonNumber": 2})
        exe_config = self.write_config("exe/config.json", {"runner1": "Carol", "runner2": "Dave", "currentSeasonNumber": 5})
        with mock.patch.object(sys, "frozen", True, create=True), \
                mock.patch.object(sys, "executable", str(exe_config.parent.resolve() / "mcsrrunnerinfo")):
            candidates = runnerconfig.default_config_candidates(cwd_config.parent)
            self.assertEqual(find_config_file(candidates), cwd_config)

            cwd_config.unlink()
            self.assertEqual(find_config_file(candidates), exe_config.parent.resolve() / "config.json")

class TestLoadConfig(ConfigTestCase):
    def test_loads_json(self):
        filepath = self.write_config("config.json", {"runner1": "Alice", "runner2": "Bob", "currentSeasonNumber": 2})
        config = load_config([], candidates=[filepath])
        self.assertEqual(config.runner1, "Alice")
        self.assertEqual(config.runner2, "Bob")
        self.assertEqual(config.current_season_number, 2)
        self.assertEqual(config.config_path, filepath)
        self.assertFalse(config.verbose)

    def test_uses_first_candidate(self):
        first = self.write_config("cwd/config.json", {"runner1": "Alice", "runner2": "Bob", "currentSeasonNumber": 2})
        second = self.write_config("bundled/config.json", {"runner1": "Carol", "runner2": "Dave", "currentSeasonNumber": 5})
        config = load_config([], candidates=[first, second])
        self.assertEqual(config.runners, ("Alice", "Bob"))

    def test_explicit_config_path(self):
        filepath = self.write_config("other.json", {"runner1": "Carol", "runner2": "Dave", "currentSeasonNumber": 1})
        config = load_config(["--config", str(filepath)], candidates=[])
        self.assertEqual(config.runners, ("Carol", "Dave"))

    def test_command_line_overrides_file(self):
        filepath = self.write_config("config.json", {"runner1": "Alice", "runner2": "Bob", "currentSeasonNumber": 2})
        config = load_config(["--runner2", "Eve", "--output-dir", str(self.dirpath / "out")], candidates=[filepath])
        self.assertEqual(config.runners, ("Alice", "Eve"))
        self.assertEqual(config.output_dir, self.dirpath / "out")

    def test_no_config_found(self):
        with self.assertRaisesRegex(ConfigError, "No config.json found"):
            load_config([], candidates=[self.dirpath / "config.json"])

    def test_missing_runner(self):
        filepath = self.write_config("config.json", {"runner1": "Alice", "currentSeasonNumber": 2})
        with self.assertRaisesRegex(ConfigError, "runner1 and runner2"):
            load_config([], candidates=[filepath])

    def test_empty_runner(self):
        filepath = self.write_config("config.json", {"runner1": "Alice", "runner2": "", "currentSeasonNumber": 2})
        with self.assertRaises(ConfigError):
            load_config([], candidates=[filepath])

    def test_missing_season_number(self):
        filepath = self.write_config("config.json", {"runner1": "Alice", "runner2": "Bob"})
        with self.assertRaisesRegex(ConfigError, "currentSeasonNumber"):
            load_config([], candidates=[filepath])

    def test_invalid_season_number(self):
        filepath = self.write_config("config.json", {"runner1": "Alice", "runner2": "Bob", "currentSeasonNumber": 0})
        with self.assertRaises(ConfigError):
            load_config([], candidates=[filepath])

    def test_unparsable_file(self):
        filepath = self.write_config("config.json", "{\"runner1\": \"Alice\",")
        with self.assertRaises(ConfigError):
            load_config([], candidates=[filepath])

    def test_explicit_missing_file(self):
        with self.assertRaises(ConfigError):
            load_config(["--config", str(self.dirpath / "missing.json")], candidates=[])

if __name__ == "__main__":
    unittest.main()
