import contextlib
import io
import os
import tempfile
import unittest

from sortkit.__main__ import _main


def run(*argv: str) -> list[str]:
    stdout = io.StringIO()
    with contextlib.redirect_stdout(stdout):
        status = _main(list(argv))
    assert status == 0
    return stdout.getvalue().splitlines()


class TestCommandLine(unittest.TestCase):
    def setUp(self) -> None:
        self.directory = tempfile.TemporaryDirectory()

    def tearDown(self) -> None:
        self.directory.cleanup()

    def write_config(self, text: str) -> str:
        path = os.path.join(self.directory.name, "sortkit.toml")
        with open(path, "w", encoding="utf-8") as file:
            file.write(text)
        return path

    def assert_usage_error(self, *argv: str) -> None:
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as context:
                _main(list(argv))
        self.assertEqual(context.exception.code, 2)

    def test_insert_retain_and_contains(self):
        lines = run("5", "1", "3", "1", "4",
                    "--retain", "1", "4", "--contains", "1", "2")
        self.assertEqual(lines, ["[1, 1, 4]", "1: True", "2: False"])

    def test_empty(self):
        self.assertEqual(run(), ["[]"])

    def test_retain_nothing(self):
        self.assertEqual(run("2", "1", "--retain"), ["[]"])

    def test_reverse_and_scalars(self):
        self.assertEqual(
            run("1.5", "3", "-2", "--reverse"), ["[3, 1.5, -2]"]
        )
        self.assertEqual(run("b", "a", "--reverse", "no"), ["['a', 'b']"])

    def test_config_file(self):
        path = self.write_config(
            "[sortkit]\nreverse = true\ncapacity = 4\nincrement = 2\n"
        )
        self.assertEqual(run("1", "2", "--config", path), ["[2, 1]"])
        self.assertEqual(
            run("1", "2", "--config", path, "--reverse", "false"),
            ["[1, 2]"]
        )

    def test_invalid_config(self):
        self.assert_usage_error(
            "1", "--config", self.write_config("[sortkit]\ncolour = 1\n")
        )
        self.assert_usage_error(
            "1", "--config", self.write_config("[sortkit]\ncapacity = 'x'\n")
        )
        self.assert_usage_error(
            "1", "--config", os.path.join(self.directory.name, "missing.toml")
        )

    def test_invalid_arguments(self):
        self.assert_usage_error("1", "a")
        self.assert_usage_error("1", "--capacity", "-1")
        self.assert_usage_error("1", "--reverse", "maybe")


if __name__ == "__main__":
    unittest.main()
