import contextlib
import hashlib
import io
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from md5isaac.cli import main


def run_cli(*argv: str):
    out = io.StringIO()
    with contextlib.redirect_stdout(out):
        rc = main(list(argv))
    return rc, out.getvalue()


@mock.patch.dict(os.environ, {}, clear=True)
class TestCli(unittest.TestCase):
    def test_md5_string(self) -> None:
        rc, out = run_cli("md5", "--string", "abc")
        self.assertEqual(rc, 0)
        self.assertTrue(out.startswith("900150983cd24fb0d6963f7d28e17f72  "))

    def test_md5_files(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / "a.txt"
            data = b"hello world\n" * 100
            p.write_bytes(data)
            rc, out = run_cli("md5", "--chunk-size", "7", str(p), str(Path(td) / "missing"))
        self.assertEqual(rc, 1)
        lines = out.splitlines()
        self.assertEqual(lines[0], f"{hashlib.md5(data).hexdigest()}  {p}")
        self.assertIn("missing", lines[1])

    def test_isaac_values(self) -> None:
        rc, out = run_cli("isaac", "--seed-hex", "00000000", "--count", "3")
        self.assertEqual(rc, 0)
        self.assertEqual(out.strip(), "182600f3 300b4a8d 301b6622")

    def test_isaac_seed_text(self) -> None:
        rc, out = run_cli("isaac", "--seed-text", "This is <i>not</i> the right mytext.", "--count", "2")
        self.assertEqual(rc, 0)
        self.assertEqual(out.strip(), "c9d3bc51 5bc24339")

    def test_isaac_bytes(self) -> None:
        rc, out = run_cli("isaac", "--seed-hex", "0", "--bytes", "6")
        self.assertEqual(rc, 1)
        rc, out = run_cli("isaac", "--seed-hex", "00000000", "--bytes", "6")
        self.assertEqual(rc, 0)
        self.assertEqual(out.strip(), "f30026188d4a")

    def test_isaac_signed(self) -> None:
        rc, out = run_cli("isaac", "--count", "1", "--signed")
        self.assertEqual(rc, 0)
        self.assertEqual(int(out), 0x71D71FD2)

    def test_verify_core(self) -> None:
        rc, out = run_cli("verify-core")
        self.assertEqual(rc, 0, out)
        self.assertIn("verify-core[python]: PASS", out)


if __name__ == "__main__":
    unittest.main()
