import enum
import unittest
from collections import OrderedDict, namedtuple

from altsv import ArgumentNotMappable, RenderError, decode_line, dump, encode


class Label(enum.Enum):
    HOST = 1
    PATH = 2


class Broken:
    def __str__(self):
        raise ValueError("boom")


class Frozen:
    def __str__(self):
        return "value"


class TestEncode(unittest.TestCase):
    def test_format(self):
        self.assertEqual(encode({"label1": "value1", "label2": "value2"}), "label1:value1\tlabel2:value2")

    def test_keeps_mapping_order(self):
        self.assertEqual(encode(OrderedDict([("b", "1"), ("a", "2")])), "b:1\ta:2")

    def test_special_characters_are_escaped(self):
        self.assertEqual(encode({"label1": "value\rvalue"}), "label1:value\\rvalue")
        self.assertEqual(encode({"label1": "value\nvalue"}), "label1:value\\nvalue")
        self.assertEqual(encode({"label1": "value\tvalue"}), "label1:value\\tvalue")
        self.assertEqual(encode({"label1": "value\\value"}), "label1:value\\\\value")
        self.assertEqual(encode({"label1": "value:value"}), "label1:value\\:value")

    def test_keys_are_escaped(self):
        self.assertEqual(encode({"a:b": "c"}), "a\\:b:c")

    def test_scalar_rendering(self):
        self.assertEqual(encode({Label.HOST: 42, "f": 1.5, "t": True}), "HOST:42\tf:1.5\tt:True")

    def test_none_value_is_empty(self):
        self.assertEqual(encode({"a": None, "b": "x"}), "a:\tb:x")

    def test_trailing_whitespace_is_trimmed(self):
        self.assertEqual(encode({"a": "x  "}), "a:x")

    def test_empty_mapping(self):
        self.assertEqual(encode({}), "")

    def test_none_dumps_to_empty_string(self):
        self.assertEqual(dump(None), "")

    def test_to_dict_conversion(self):
        class Target:
            def to_dict(self):
                return {"label": "value"}

        self.assertEqual(encode(Target()), "label:value")

    def test_asdict_conversion(self):
        Point = namedtuple("Point", ["x", "y"])
        self.assertEqual(encode(Point(1, 2)), "x:1\ty:2")

    def test_to_dict_wins_over_asdict(self):
        class Target:
            def to_dict(self):
                return {"from": "to_dict"}

            def _asdict(self):
                return {"from": "_asdict"}

        self.assertEqual(encode(Target()), "from:to_dict")

    def test_not_mappable(self):
        with self.assertRaises(ArgumentNotMappable):
            encode(object())
        with self.assertRaises(TypeError):
            encode([("a", "b")])

    def test_conversion_returning_non_mapping(self):
        class Target:
            def to_dict(self):
                return [1, 2]

        with self.assertRaises(ArgumentNotMappable):
            encode(Target())

    def test_custom_str(self):
        self.assertEqual(encode({"label": Frozen()}), "label:value")

    def test_render_error(self):
        item = Broken()
        with self.assertRaises(RenderError) as ctx:
            encode({"ok": "1", "bad": item})
        self.assertIs(ctx.exception.item, item)
        self.assertIsInstance(ctx.exception.__cause__, ValueError)


class TestRoundTrip(unittest.TestCase):
    def test_plain_values(self):
        record = {"host": "127.0.0.1", "path": "/index.html", "status": "200"}
        self.assertEqual(decode_line(encode(record)), record)

    def test_escape_symmetry(self):
        for c in ("\n", "\r", "\t", ":", "\\"):
            record = {f"k{c}k": f"v{c}v"}
            self.assertEqual(decode_line(encode(record)), record, repr(c))

    def test_none_round_trips(self):
        self.assertEqual(decode_line(encode({"a": None, "b": "x"})), {"a": None, "b": "x"})


if __name__ == "__main__":
    unittest.main()
