"""
Alias table tests (declarations, chain resolution, cycle safety).

Scope
- parse(): additive merging, string-or-list values, skipped malformed declarations.
- resolve(): chains, unknown names, cycles of any length, reserved targets.
- copies are independent.

Conventions
- Test method names follow CamelCase per project convention.
"""
import unittest
from unittest import TestCase

from brief.aliases import AliasTable


class TestAliasDeclarations(TestCase):

    def testSingleStringIsOneElementList(self):
        table = AliasTable().parse({"target": "alias"})
        self.assertEqual(table.table, {"alias": "target"})

    def testListOfAliases(self):
        table = AliasTable().parse({"target": ["a", "b"]})
        self.assertEqual(table.table, {"a": "target", "b": "target"})

    def testDeclarationsMergeAdditively(self):
        table = AliasTable().parse({"first": "a"}).parse({"second": ["b"]})
        self.assertEqual(table.table, {"a": "first", "b": "second"})

    def testLaterDeclarationWinsPerAlias(self):
        table = AliasTable().parse({"first": "a"}).parse({"second": "a"})
        self.assertEqual(table.resolve("a"), "second")

    def testMalformedValuesAreSkipped(self):
        table = AliasTable().parse({"target": 12, "other": None, "third": ["ok", 3]})
        self.assertEqual(table.table, {"ok": "third"})

    def testEmptyOrNonMappingIsNoop(self):
        table = AliasTable()
        table.parse({})
        table.parse(None)
        table.parse(["target", "alias"])
        self.assertEqual(len(table), 0)

    def testReservedNamesAreSkipped(self):
        table = AliasTable().parse({"store": "a", "target": ["logger", "b"]})
        self.assertEqual(table.table, {"b": "target"})

    def testTableViewIsACopy(self):
        table = AliasTable().parse({"target": "alias"})
        table.table["other"] = "target"
        self.assertNotIn("other", table)


class TestAliasResolution(TestCase):

    def testDirectAlias(self):
        self.assertEqual(AliasTable({"alias": "target"}).resolve("alias"), "target")

    def testChainResolvesToLastName(self):
        table = AliasTable({"a": "b", "b": "c", "c": "d"})
        self.assertEqual(table.resolve("a"), "d")
        self.assertEqual(table.resolve("c"), "d")

    def testUnknownNameIsNone(self):
        self.assertIsNone(AliasTable({"a": "b"}).resolve("b"))
        self.assertIsNone(AliasTable().resolve("anything"))

    def testNonStringNameIsNone(self):
        self.assertIsNone(AliasTable({"a": "b"}).resolve(0))
        self.assertIsNone(AliasTable({"a": "b"}).resolve(["a"]))

    def testTwoNodeCycleIsNone(self):
        table = AliasTable({"a": "b", "b": "a"})
        self.assertIsNone(table.resolve("a"))
        self.assertIsNone(table.resolve("b"))

    def testSelfLoopIsNone(self):
        self.assertIsNone(AliasTable({"a": "a"}).resolve("a"))

    def testLongCycleTerminates(self):
        size = 5000
        table = AliasTable({f"n{index}": f"n{(index + 1) % size}" for index in range(size)})
        self.assertIsNone(table.resolve("n0"))

    def testChainIntoCycleIsNone(self):
        table = AliasTable({"entry": "a", "a": "b", "b": "a"})
        self.assertIsNone(table.resolve("entry"))

    def testLongChainResolvesIteratively(self):
        size = 5000
        table = AliasTable({f"n{index}": f"n{index + 1}" for index in range(size)})
        self.assertEqual(table.resolve("n0"), f"n{size}")


class TestAliasCopies(TestCase):

    def testCopyIsIndependent(self):
        table = AliasTable({"a": "b"})
        clone = table.copy()
        clone.parse({"c": "d"})
        self.assertNotIn("d", table)
        self.assertIn("d", clone)
        self.assertEqual(table.export(), {"a": "b"})

    def testEquality(self):
        self.assertEqual(AliasTable({"a": "b"}), AliasTable().parse({"b": "a"}))


if __name__ == "__main__":
    unittest.main()
