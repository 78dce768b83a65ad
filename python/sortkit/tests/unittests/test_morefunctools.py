import unittest

from sortkit.auxiliary.morefunctools import and_then, rethrow, rethrowing


def parse_positive(text: str) -> int:
    """Parse a positive integer."""
    value = int(text)
    if value <= 0:
        raise ArithmeticError(f"{value} is not positive")
    return value


class TestRethrow(unittest.TestCase):
    def test_rethrow_instance_and_type(self):
        error = KeyError("key")
        with self.assertRaises(KeyError) as context:
            rethrow(error)
        self.assertIs(context.exception, error)
        with self.assertRaises(LookupError):
            rethrow(LookupError)

    def test_rethrowing_passes_results(self):
        parse = rethrowing(parse_positive)
        self.assertEqual(list(map(parse, ["1", "20"])), [1, 20])
        self.assertEqual(parse.__name__, "parse_positive")
        self.assertEqual(parse.__doc__, "Parse a positive integer.")

    def test_rethrowing_propagates_unchanged(self):
        parse = rethrowing(parse_positive)
        with self.assertRaises(ArithmeticError):
            parse("-1")
        with self.assertRaises(ValueError):
            parse("x")

    def test_rethrowing_wraps_failures(self):
        parse = rethrowing(parse_positive, wrap=RuntimeError)
        with self.assertRaises(RuntimeError) as context:
            list(map(parse, ["2", "0"]))
        self.assertIsInstance(context.exception.__cause__, ArithmeticError)
        self.assertEqual(str(context.exception), "0 is not positive")

    def test_rethrowing_requires_callable(self):
        with self.assertRaises(TypeError):
            rethrowing(None)


class TestAndThen(unittest.TestCase):
    def test_runs_in_sequence(self):
        calls = []
        composed = and_then(
            lambda a, b: calls.append(("first", a + b)),
            lambda a, b: calls.append(("after", a * b))
        )
        composed(2.0, 3.0)
        self.assertEqual(calls, [("first", 5.0), ("after", 6.0)])

    def test_after_is_skipped_on_failure(self):
        calls = []

        def fail(a, b):
            raise ValueError("fail")

        composed = and_then(fail, lambda a, b: calls.append((a, b)))
        with self.assertRaises(ValueError):
            composed(1.0, 2.0)
        self.assertEqual(calls, [])

    def test_requires_operations(self):
        with self.assertRaises(TypeError):
            and_then(lambda a, b: None, None)
        with self.assertRaises(TypeError):
            and_then(None, lambda a, b: None)


if __name__ == "__main__":
    unittest.main()
