import tempfile
import unittest
from pathlib import Path

from vaformat.config import IGNORE_FILE, METADATA_FILE, RunConfig, load_ignore_rules
from vaformat.errors import ConfigError


class TestRunConfig(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def write_metadata(self, text):
        (self.root / METADATA_FILE).write_text(text, encoding="utf-8")

    def test_missing_file_gives_defaults(self):
        config = RunConfig.load(self.root)
        self.assertEqual(config.description, "")
        self.assertEqual(config.problem_statements, [])
        self.assertEqual(config.questions, [])
        self.assertIsNone(config.metadata_path)

    def test_full_file(self):
        self.write_metadata(
            "description: A todo app\n"
            "problem_statement:\n"
            "  - Tasks vanish on reload\n"
            "  - Slow startup\n"
            "questions:\n"
            "  - Why do tasks vanish?\n"
        )
        config = RunConfig.load(self.root)
        self.assertEqual(config.description, "A todo app")
        self.assertEqual(config.problem_statements, ["Tasks vanish on reload", "Slow startup"])
        self.assertEqual(config.questions, ["Why do tasks vanish?"])
        self.assertEqual(config.metadata_path, self.root / METADATA_FILE)

    def test_missing_keys_use_defaults(self):
        self.write_metadata("questions:\n  - One?\n")
        config = RunConfig.load(self.root)
        self.assertEqual(config.description, "")
        self.assertEqual(config.problem_statements, [])
        self.assertEqual(config.questions, ["One?"])

    def test_empty_document_gives_defaults(self):
        self.write_metadata("")
        config = RunConfig.load(self.root)
        self.assertEqual(config.description, "")
        self.assertEqual(config.questions, [])

    def test_scalar_entries_become_strings(self):
        self.write_metadata("description: 42\nquestions:\n  - 7\n")
        config = RunConfig.load(self.root)
        self.assertEqual(config.description, "42")
        self.assertEqual(config.questions, ["7"])

    def test_malformed_yaml_is_fatal(self):
        self.write_metadata("description: [unclosed\n")
        with self.assertRaises(ConfigError) as ctx:
            RunConfig.load(self.root)
        self.assertEqual(ctx.exception.path, self.root / METADATA_FILE)

    def test_non_mapping_is_fatal(self):
        self.write_metadata("- just\n- a list\n")
        with self.assertRaises(ConfigError):
            RunConfig.load(self.root)

    def test_wrong_shape_is_fatal(self):
        self.write_metadata("problem_statement: not a list\n")
        with self.assertRaises(ConfigError):
            RunConfig.load(self.root)


class TestLoadIgnoreRules(unittest.TestCase):
    def test_missing_file_admits_everything(self):
        with tempfile.TemporaryDirectory() as tmp:
            rules = load_ignore_rules(Path(tmp))
        self.assertFalse(rules)
        self.assertFalse(rules.matches("x.log"))

    def test_rules_are_read_from_root(self):
        with tempfile.TemporaryDirectory() as tmp:
            (Path(tmp) / IGNORE_FILE).write_text("# logs\n*.log\n!keep.log\n", encoding="utf-8")
            rules = load_ignore_rules(Path(tmp))
        self.assertEqual(rules.patterns, ["*.log", "!keep.log"])
        self.assertTrue(rules.matches("other.log"))
        self.assertFalse(rules.matches("keep.log"))


if __name__ == "__main__":
    unittest.main()
