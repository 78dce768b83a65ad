import unittest

from sortkit.datastructures.mappings import ForwardingMap


class UpperKeyMap(ForwardingMap):
    def __setitem__(self, key, value):
        super().__setitem__(key.upper(), value)


class TestForwardingMap(unittest.TestCase):
    def test_requires_source(self):
        with self.assertRaises(TypeError):
            ForwardingMap(None)

    def test_forwards_basic_operations(self):
        source = {"a": 1}
        mapping = ForwardingMap(source)
        mapping["b"] = 2
        self.assertEqual(source, {"a": 1, "b": 2})
        self.assertEqual(mapping["a"], 1)
        self.assertEqual(len(mapping), 2)
        self.assertIn("b", mapping)
        self.assertEqual(list(mapping), ["a", "b"])
        del mapping["a"]
        self.assertEqual(source, {"b": 2})
        with self.assertRaises(KeyError):
            mapping["a"]
        self.assertIs(mapping.source, source)

    def test_forwards_dict_methods(self):
        source = {"a": 1, "b": 2}
        mapping = ForwardingMap(source)
        self.assertEqual(mapping.get("c", 3), 3)
        self.assertIsNone(mapping.get("c"))
        self.assertEqual(list(mapping.keys()), ["a", "b"])
        self.assertEqual(list(mapping.values()), [1, 2])
        self.assertEqual(list(mapping.items()), [("a", 1), ("b", 2)])
        self.assertEqual(mapping.setdefault("c", 3), 3)
        self.assertEqual(mapping.pop("c"), 3)
        self.assertEqual(mapping.pop("c", None), None)
        mapping.update({"d": 4}, e=5)
        self.assertEqual(source, {"a": 1, "b": 2, "d": 4, "e": 5})
        self.assertEqual(mapping.popitem(), ("e", 5))
        mapping.clear()
        self.assertEqual(source, {})

    def test_contains_value_checks_values(self):
        mapping = ForwardingMap({"a": 1})
        self.assertTrue(mapping.contains_value(1))
        self.assertFalse(mapping.contains_value("a"))

    def test_put_if_absent_and_replace(self):
        source = {"a": 1, "n": None}
        mapping = ForwardingMap(source)
        self.assertEqual(mapping.put_if_absent("a", 9), 1)
        self.assertIsNone(mapping.put_if_absent("b", 2))
        self.assertIsNone(mapping.put_if_absent("n", 3))
        self.assertEqual(source, {"a": 1, "n": 3, "b": 2})
        self.assertEqual(mapping.replace("a", 10), 1)
        self.assertIsNone(mapping.replace("z", 10))
        self.assertNotIn("z", source)
        self.assertTrue(mapping.replace_if("a", 10, 11))
        self.assertFalse(mapping.replace_if("a", 10, 12))
        self.assertEqual(source["a"], 11)
        self.assertFalse(mapping.remove_if("a", 10))
        self.assertTrue(mapping.remove_if("a", 11))
        self.assertNotIn("a", source)

    def test_compute_helpers(self):
        source = {"a": 1}
        mapping = ForwardingMap(source)
        self.assertEqual(mapping.compute_if_absent("a", lambda key: 5), 1)
        self.assertEqual(mapping.compute_if_absent("b", lambda key: 2), 2)
        self.assertIsNone(mapping.compute_if_absent("c", lambda key: None))
        self.assertNotIn("c", source)
        self.assertEqual(
            mapping.compute_if_present("a", lambda key, value: value + 1), 2
        )
        self.assertIsNone(
            mapping.compute_if_present("z", lambda key, value: value + 1)
        )
        self.assertIsNone(mapping.compute_if_present("b", lambda k, v: None))
        self.assertNotIn("b", source)
        self.assertEqual(
            mapping.compute("a", lambda key, value: (value or 0) * 10), 20
        )
        self.assertEqual(
            mapping.compute("n", lambda key, value: (value or 0) + 7), 7
        )
        self.assertIsNone(mapping.compute("n", lambda key, value: None))
        self.assertEqual(source, {"a": 20})

    def test_merge(self):
        source = {"a": [1]}
        mapping = ForwardingMap(source)
        mapping.merge("a", [2], lambda old, new: old + new)
        mapping.merge("b", [3], lambda old, new: old + new)
        self.assertEqual(source, {"a": [1, 2], "b": [3]})
        mapping.merge("a", [4], lambda old, new: None)
        self.assertEqual(source, {"b": [3]})
        with self.assertRaises(TypeError):
            mapping.merge("b", None, lambda old, new: old)

    def test_for_each_and_replace_all(self):
        source = {"a": 1, "b": 2}
        mapping = ForwardingMap(source)
        seen = []
        mapping.for_each(lambda key, value: seen.append((key, value)))
        self.assertEqual(seen, [("a", 1), ("b", 2)])
        mapping.replace_all(lambda key, value: key * value)
        self.assertEqual(source, {"a": "a", "b": "bb"})

    def test_subclass_overrides(self):
        source = {}
        mapping = UpperKeyMap(source)
        mapping["a"] = 1
        mapping.update(b=2)
        self.assertEqual(source, {"A": 1, "b": 2})
        self.assertEqual(repr(mapping), "UpperKeyMap({'A': 1, 'b': 2})")


if __name__ == "__main__":
    unittest.main()
