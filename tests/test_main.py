# tests/test_main.py

"""Tests for the command-line entry point and its exit codes."""

import io
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from shop_assist.cli import main
from shop_assist.ui.formatter import PlainFormatter


class TestParser(unittest.TestCase):
    """Argument parsing."""

    def test_defaults(self) -> None:
        """No flags gives sentinel entry and no withdrawal check."""
        args = main._build_parser().parse_args([])
        self.assertFalse(args.ask_count)
        self.assertIsNone(args.receipts_dir)

    def test_flags(self) -> None:
        """All switches parse."""
        args = main._build_parser().parse_args(
            ["--plain", "--ask-count", "--verify-withdrawal", "-o", "out"]
        )
        self.assertTrue(args.plain)
        self.assertTrue(args.ask_count)
        self.assertTrue(args.verify_withdrawal)
        self.assertEqual(args.receipts_dir, "out")


class TestRun(unittest.TestCase):
    """main.run exit codes."""

    def setUp(self) -> None:
        self.tmp_dir = Path(tempfile.mkdtemp())

    def _run(self, stdin_text: str, *extra: str) -> tuple[int, str]:
        out = io.StringIO()
        with (
            patch("sys.stdin", io.StringIO(stdin_text)),
            patch.object(
                main, "make_formatter", lambda plain: PlainFormatter(out)
            ),
        ):
            code = main.run(["--plain", "-o", str(self.tmp_dir), *extra])
        return code, out.getvalue()

    def test_affordable_exit_zero(self) -> None:
        """A complete affordable session exits 0 and writes a receipt."""
        code, _text = self._run("Book\n10\ndone\n10\n")
        self.assertEqual(code, 0)
        self.assertEqual(len(list(self.tmp_dir.glob("receipt_*.txt"))), 1)

    def test_cancel_exit_zero(self) -> None:
        """Cancelling payment is a normal exit."""
        code, text = self._run("Book\n15\ndone\n10\n4\n")
        self.assertEqual(code, 0)
        self.assertIn("Shortfall: $5.00", text)
        self.assertEqual(list(self.tmp_dir.glob("receipt_*.txt")), [])

    def test_empty_catalog_exit_zero(self) -> None:
        """'done' straight away exits 0."""
        code, _text = self._run("DONE\n")
        self.assertEqual(code, 0)

    def test_input_exhausted_exit_one(self) -> None:
        """End of input mid-prompt exits 1."""
        code, _text = self._run("Book\n")
        self.assertEqual(code, 1)

    def test_receipt_failure_exit_one(self) -> None:
        """An unwritable receipt location exits 1."""
        blocker = self.tmp_dir / "blocker"
        blocker.write_text("", encoding="utf-8")
        out = io.StringIO()
        with (
            patch("sys.stdin", io.StringIO("Tea\n1\ndone\n5\n")),
            patch.object(
                main, "make_formatter", lambda plain: PlainFormatter(out)
            ),
        ):
            code = main.run(["-o", str(blocker)])
        self.assertEqual(code, 1)

    def test_input_exhausted_logged_once(self) -> None:
        """End of input produces a single error record."""
        with self.assertLogs("shop_assist", level="ERROR") as logs:
            code, _text = self._run("Book\n")
        self.assertEqual(code, 1)
        self.assertEqual(len(logs.records), 1)

    def test_receipt_failure_logged_once_without_traceback(self) -> None:
        """A receipt failure yields one error record and no traceback on it."""
        blocker = self.tmp_dir / "blocker"
        blocker.write_text("", encoding="utf-8")
        out = io.StringIO()
        with (
            patch("sys.stdin", io.StringIO("Tea\n1\ndone\n5\n")),
            patch.object(
                main, "make_formatter", lambda plain: PlainFormatter(out)
            ),
            self.assertLogs("shop_assist", level="ERROR") as logs,
        ):
            code = main.run(["-o", str(blocker)])
        self.assertEqual(code, 1)
        self.assertEqual(len(logs.records), 1)
        self.assertIsNone(logs.records[0].exc_info)

    def test_verify_withdrawal_flag_reaches_session(self) -> None:
        """--verify-withdrawal asks for a withdrawal amount."""
        code, text = self._run(
            "Book\n15\ndone\n10\n1\n2\n", "--verify-withdrawal"
        )
        self.assertEqual(code, 0)
        self.assertIn("Enter withdrawal amount", text)
        self.assertIn("Payment declined", text)


class TestMain(unittest.TestCase):
    """main() start-up."""

    def test_unwritable_log_dir_exits_one(self) -> None:
        """A log directory that cannot be created ends the run cleanly."""
        with (
            patch.object(
                main, "setup_logging", side_effect=PermissionError("read-only")
            ),
            patch.object(main, "run") as run_mock,
        ):
            with self.assertRaises(SystemExit) as ctx:
                main.main()
        self.assertEqual(ctx.exception.code, 1)
        run_mock.assert_not_called()

    def test_exit_code_from_run(self) -> None:
        """main() exits with the session's status."""
        with (
            patch.object(main, "setup_logging", return_value=Path("x.log")),
            patch.object(main, "run", return_value=0),
        ):
            with self.assertRaises(SystemExit) as ctx:
                main.main()
        self.assertEqual(ctx.exception.code, 0)


if __name__ == "__main__":
    unittest.main()
