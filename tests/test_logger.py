import io
import json
import unittest

from fluentopt import ConsoleLogger, Optional


class TestConsoleLogger(unittest.TestCase):
    def test_text_output_and_level_filter(self):
        buf = io.StringIO()
        log = ConsoleLogger(name="t", level="INFO", stream=buf)
        log.debug("hidden")
        log.info("shown", b=2, a=1)
        out = buf.getvalue().strip().splitlines()
        self.assertEqual(len(out), 1)
        self.assertIn("t INFO: shown a=1 b=2", out[0])

    def test_json_output_with_bound_fields(self):
        buf = io.StringIO()
        log = ConsoleLogger(json_output=True, stream=buf).bind(req="r1")
        log.warn("careful", n=3)
        data = json.loads(buf.getvalue())
        self.assertEqual(data["level"], "WARN")
        self.assertEqual(data["msg"], "careful")
        self.assertEqual(data["fields"], {"req": "r1", "n": 3})

    def test_set_level(self):
        log = ConsoleLogger(level="ERROR")
        self.assertEqual(log.level_name, "ERROR")
        log.set_level("debug")
        self.assertEqual(log.level_name, "DEBUG")
        log.set_level("bogus")
        self.assertEqual(log.level_name, "DEBUG")

    def test_tap_logs_peeked_values(self):
        buf = io.StringIO()
        log = ConsoleLogger(level="DEBUG", stream=buf)
        r = Optional.empty().peek(log.tap("before")).or_(lambda: Optional.of(7)).peek(log.tap("after"))
        self.assertEqual(r.get(), 7)
        lines = buf.getvalue().strip().splitlines()
        self.assertIn("DEBUG: before value=None", lines[0])
        self.assertIn("DEBUG: after value=7", lines[1])

    def test_tap_rejects_unknown_level(self):
        with self.assertRaises(ValueError):
            ConsoleLogger().tap("x", level="LOUD")
