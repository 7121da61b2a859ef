#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Test: CLI Output Formatting Module

This test verifies:
1. Colour detection honours TTY and NO_COLOR
2. paint() only emits ANSI codes when colour is enabled
3. write() falls back to ASCII on encoding errors
4. Error reports list the full causal chain
"""

import io
import unittest
from unittest.mock import MagicMock, patch

from toast.core.errors import ReadFailure, ToastError, error_chain
from toast.scripts.cli_output import CLIOutput


class TtyStringIO(io.StringIO):
    def isatty(self):
        return True


class TestDetect(unittest.TestCase):
    def test_pipe_has_no_color(self):
        out = CLIOutput.detect(stream=io.StringIO(), no_color=False)
        self.assertFalse(out.use_color)

    def test_tty_has_color(self):
        out = CLIOutput.detect(stream=TtyStringIO(), no_color=False)
        self.assertTrue(out.use_color)

    def test_no_color_wins_over_tty(self):
        out = CLIOutput.detect(stream=TtyStringIO(), no_color=True)
        self.assertFalse(out.use_color)

    def test_no_color_read_from_environment(self):
        with patch.dict("os.environ", {"NO_COLOR": "1"}):
            out = CLIOutput.detect(stream=TtyStringIO())
        self.assertFalse(out.use_color)


class TestPaintAndWrite(unittest.TestCase):
    def test_paint_plain(self):
        self.assertEqual(CLIOutput(use_color=False).paint("x", "red"), "x")

    def test_paint_colored(self):
        painted = CLIOutput(use_color=True).paint("x", "cyan")
        self.assertTrue(painted.startswith("\x1b[36m"))
        self.assertTrue(painted.endswith("\x1b[0m"))
        self.assertIn("x", painted)

    def test_write_to_stream(self):
        stream = io.StringIO()
        CLIOutput(stream=stream).write("hello\n")
        self.assertEqual(stream.getvalue(), "hello\n")

    def test_write_ascii_fallback(self):
        stream = MagicMock()
        stream.write.side_effect = [UnicodeEncodeError("ascii", "✓", 0, 1, "bad"), None]
        CLIOutput(stream=stream).write("✓ ok")
        stream.write.assert_called_with("? ok")


class TestErrorReport(unittest.TestCase):
    def test_single_error(self):
        text = CLIOutput().format_error_report(ToastError("top level"))
        self.assertEqual(text, "Error: top level")

    def test_causal_chain(self):
        try:
            try:
                raise FileNotFoundError("no such file")
            except FileNotFoundError as e:
                raise ReadFailure("/proj/x.json", "x.json") from e
        except ReadFailure as e:
            text = CLIOutput().format_error_report(e)

        lines = text.splitlines()
        self.assertEqual(lines[0], "Error: Failed to read `x.json` from `/proj/x.json`")
        self.assertEqual(lines[2], "Caused by:")
        self.assertEqual(lines[3], "   0: no such file")

    def test_empty_message_uses_type_name(self):
        error = ToastError("outer")
        error.__cause__ = KeyError()
        self.assertIn("   0: KeyError", CLIOutput().format_error_report(error))

    def test_error_chain_outermost_first(self):
        root = OSError("root")
        middle = ReadFailure("/proj/x.json", "x.json")
        middle.__cause__ = root
        outer = ToastError("outer")
        outer.__cause__ = middle
        self.assertEqual(error_chain(outer), [outer, middle, root])

    def test_error_report_writes_line(self):
        stream = io.StringIO()
        CLIOutput(stream=stream).error_report(ToastError("bad"))
        self.assertEqual(stream.getvalue(), "Error: bad\n")
