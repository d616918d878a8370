"""Tests for the logkit exception types."""
from __future__ import annotations

import unittest

from logkit.core.exceptions import LogkitError, LogReleaseError, UnsafePathError


class TestLogkitErrorToDict(unittest.TestCase):
    def test_release_error_with_cause(self) -> None:
        try:
            raise OSError("disk full")
        except OSError as exc:
            err = LogReleaseError("failed to close log file /tmp/go.log", details={"path": "/tmp/go.log"}, cause=exc)
        out = err.to_dict()
        self.assertEqual(out["message"], "failed to close log file /tmp/go.log")
        self.assertEqual(out["code"], "LOG_RELEASE_ERROR")
        self.assertEqual(out["details"], {"path": "/tmp/go.log"})
        self.assertEqual(out["cause"], "disk full")
        self.assertIn("OSError: disk full\n", out["cause_traceback"])
        self.assertIn("raise OSError", "".join(out["cause_traceback"]))

    def test_minimal_error_omits_empty_parts(self) -> None:
        out = UnsafePathError("bad filename").to_dict()
        self.assertEqual(out, {"message": "bad filename", "code": "UNSAFE_PATH"})

    def test_explicit_code_wins(self) -> None:
        err = LogkitError("custom", code="CUSTOM")
        self.assertEqual(err.to_dict()["code"], "CUSTOM")
        self.assertEqual(str(err), "custom")
        self.assertEqual(repr(err), "LogkitError(message='custom', code='CUSTOM')")


if __name__ == "__main__":
    unittest.main()
