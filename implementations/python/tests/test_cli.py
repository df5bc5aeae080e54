"""Tests for the cidenc command-line interface."""

from __future__ import annotations

import contextlib
import io
import os
import sys
import tempfile
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from cidenc import __version__
from cidenc._cli import main


def _run(argv):
    """Run the CLI, returning (exit code, stdout, stderr)."""
    out, err = io.StringIO(), io.StringIO()
    code = 0
    with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
        try:
            main(argv)
        except SystemExit as e:
            code = e.code
    return code, out.getvalue(), err.getvalue()


class TestCli(unittest.TestCase):
    def setUp(self):
        fd, self.path = tempfile.mkstemp()
        with os.fdopen(fd, "wb") as f:
            f.write(b"Hello World")

    def tearDown(self):
        os.unlink(self.path)

    def test_encode_default_is_raw_sha256(self):
        code, out, _ = _run(["encode", "--input", self.path])
        self.assertEqual(code, 0)
        self.assertEqual(
            out.strip(),
            "01551220a591a6d40bf420404a011733cfb7b190d62c65bf0bcda32b57b277d9ad9f146e",
        )

    def test_encode_identity(self):
        code, out, _ = _run(["encode", "-c", "raw", "-H", "identity", "-i", self.path])
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), "0155000b48656c6c6f20576f726c64")

    def test_encode_base16(self):
        code, out, _ = _run(["encode", "-H", "identity", "-i", self.path, "--base", "base16"])
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), "f0155000b48656c6c6f20576f726c64")

    def test_encode_keccak(self):
        code, out, _ = _run(["encode", "-H", "keccak-256", "-i", self.path])
        self.assertEqual(code, 0)
        self.assertTrue(out.strip().startswith("01551b20592fa743"))

    def test_unknown_codec_rejected(self):
        code, _, _ = _run(["encode", "--codec", "bogus", "-i", self.path])
        self.assertEqual(code, 2)

    def test_missing_input_file(self):
        code, _, err = _run(["encode", "-i", self.path + ".missing"])
        self.assertEqual(code, 2)
        self.assertIn("cannot read input", err)

    def test_varint(self):
        code, out, _ = _run(["varint", "300"])
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), "ac02")

    def test_varint_too_large(self):
        code, _, err = _run(["varint", "268435456"])
        self.assertEqual(code, 2)
        self.assertIn("ERR_VALUE_TOO_LARGE", err)

    def test_version(self):
        code, out, _ = _run(["version"])
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), "cidenc {}".format(__version__))

    def test_no_command(self):
        code, _, _ = _run([])
        self.assertEqual(code, 1)


if __name__ == "__main__":
    unittest.main()
