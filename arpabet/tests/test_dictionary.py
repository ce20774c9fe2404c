#!/usr/bin/env python

from unittest import main

from arpabet.dictionary import Arpabet, ReadOnlyArpabet
from arpabet.exceptions import ReadOnlyDictionaryError
from arpabet.parser import load_from_text
from arpabet.phoneme import Phoneme
from arpabet.tests.basic_test_case import BasicTestCase


class ArpabetTest(BasicTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.a = load_from_text("FOO  F UW1\nBAR  B AA1 R")
        self.b = load_from_text("FOO  B UW1\nBAZ  B AE1 Z")

    def test_empty(self):
        arpabet = Arpabet()
        self.assertEqual(len(arpabet), 0)
        self.assertEqual(arpabet.keys(), [])
        self.assertIsNone(arpabet.get_polyphone("foo"))
        self.assertIsNone(arpabet.get_polyphone_str("foo"))

    def test_lookup_is_exact(self):
        self.assertEqual(self.a.get_polyphone("foo"), self.polyphone("F UW1"))
        for word in ("FOO", "Foo", " foo", "fo"):
            with self.subTest(word=word):
                self.assertIsNone(self.a.get_polyphone(word))
                self.assertNotIn(word, self.a)

    def test_lookup_returns_a_copy(self):
        polyphone = self.a.get_polyphone("bar")
        polyphone.append(Phoneme.from_token("Z"))
        polyphone[0] = Phoneme.from_token("P")
        self.assertEqual(self.a.get_polyphone_str("bar"), ["B", "AA1", "R"])

    def test_insert(self):
        arpabet = Arpabet()
        self.assertIsNone(arpabet.insert("foo", self.polyphone("F UW1")))
        previous = arpabet.insert("foo", self.polyphone("F AO1"))
        self.assertEqual(previous, self.polyphone("F UW1"))
        self.assertEqual(arpabet.get_polyphone_str("foo"), ["F", "AO1"])
        self.assertEqual(len(arpabet), 1)

    def test_insert_copies(self):
        arpabet = Arpabet()
        polyphone = self.polyphone("F UW1")
        arpabet.insert("foo", polyphone)
        polyphone.clear()
        self.assertEqual(arpabet.get_polyphone_str("foo"), ["F", "UW1"])

    def test_insert_empty_polyphone(self):
        arpabet = Arpabet()
        arpabet.insert("hmm", [])
        self.assertEqual(arpabet.get_polyphone("hmm"), [])
        self.assertIn("hmm", arpabet)

    def test_remove(self):
        removed = self.a.remove("foo")
        self.assertEqual(removed, self.polyphone("F UW1"))
        self.assertEqual(len(self.a), 1)
        self.assertIsNone(self.a.get_polyphone("foo"))

    def test_remove_is_idempotent(self):
        self.assertIsNone(self.a.remove("bin"))
        self.assertEqual(len(self.a), 2)
        self.a.remove("foo")
        once = self.a.keys()
        self.assertIsNone(self.a.remove("foo"))
        self.assertEqual(self.a.keys(), once)

    def test_combine(self):
        combined = self.a.combine(self.b)
        expected = load_from_text("FOO  B UW1\nBAR  B AA1 R\nBAZ  B AE1 Z")
        self.assertEqual(combined, expected)
        self.assertEqual(combined.get_polyphone_str("foo"), ["B", "UW1"])
        self.assertEqual(combined.get_polyphone_str("bar"), ["B", "AA1", "R"])
        self.assertEqual(combined.get_polyphone_str("baz"), ["B", "AE1", "Z"])
        self.assertIsNone(combined.get_polyphone("bin"))
        # neither input changes
        self.assertEqual(self.a.get_polyphone_str("foo"), ["F", "UW1"])
        self.assertNotIn("baz", self.a)
        self.assertNotIn("bar", self.b)

    def test_merge_from(self):
        self.a.merge_from(self.b)
        self.assertEqual(len(self.a), 3)
        self.assertEqual(self.a.get_polyphone_str("foo"), ["B", "UW1"])
        self.assertEqual(self.a.get_polyphone_str("baz"), ["B", "AE1", "Z"])
        self.b.insert("baz", self.polyphone("B AA1 Z"))
        self.assertEqual(self.a.get_polyphone_str("baz"), ["B", "AE1", "Z"])

    def test_copy_is_independent(self):
        copy = self.a.copy()
        self.assertEqual(copy, self.a)
        copy.insert("new", self.polyphone("N UW1"))
        copy.remove("foo")
        self.assertIn("foo", self.a)
        self.assertNotIn("new", self.a)

    def test_keys_and_iteration(self):
        self.assertEqual(sorted(self.a.keys()), ["bar", "foo"])
        self.assertEqual(sorted(self.a), ["bar", "foo"])

    def test_equality(self):
        self.assertEqual(self.a, load_from_text("BAR  B AA1 R\nFOO  F UW1"))
        self.assertNotEqual(self.a, self.b)
        self.assertNotEqual(self.a, {"foo": self.polyphone("F UW1")})

    def test_repr(self):
        self.assertEqual(repr(self.a), "Arpabet(2 entries)")

    def test_from_prebuilt_table(self):
        table = {
            "foo": tuple(self.polyphone("F UW1")),
            "bar": tuple(self.polyphone("B AA1 R")),
        }
        arpabet = Arpabet.from_prebuilt_table(table)
        self.assertEqual(arpabet, self.a)
        arpabet.insert("baz", self.polyphone("B AE1 Z"))
        arpabet.remove("foo")
        self.assertIn("foo", table)
        self.assertNotIn("baz", table)


class ReadOnlyArpabetTest(BasicTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.shared = ReadOnlyArpabet.from_prebuilt_table(
            {"foo": tuple(self.polyphone("F UW1"))}
        )

    def test_lookups(self):
        self.assertEqual(self.shared.get_polyphone_str("foo"), ["F", "UW1"])
        self.assertEqual(len(self.shared), 1)

    def test_mutation_is_refused(self):
        other = load_from_text("BAR  B AA1 R")
        for mutate in (
            lambda: self.shared.insert("bar", self.polyphone("B AA1 R")),
            lambda: self.shared.remove("foo"),
            lambda: self.shared.merge_from(other),
        ):
            with self.assertRaises(ReadOnlyDictionaryError):
                mutate()
        self.assertEqual(self.shared.keys(), ["foo"])

    def test_copy_and_combine_are_mutable(self):
        copy = self.shared.copy()
        self.assertNotIsInstance(copy, ReadOnlyArpabet)
        copy.insert("bar", self.polyphone("B AA1 R"))
        combined = self.shared.combine(load_from_text("FOO  F AO1"))
        self.assertNotIsInstance(combined, ReadOnlyArpabet)
        self.assertEqual(combined.get_polyphone_str("foo"), ["F", "AO1"])
        self.assertEqual(self.shared.get_polyphone_str("foo"), ["F", "UW1"])
        self.assertNotIn("bar", self.shared)


if __name__ == "__main__":
    main()
