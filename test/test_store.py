"""
Ordered store tests (keys, orders, gap filling).

Scope
- insert(): synthesised keys and orders, overwrite semantics.
- order limits on empty and populated stores.
- ordered(): dense output with fill values.
- copies are independent.
- holder() and the iskey()/isorder() predicates.
"""
import unittest
from unittest import TestCase

from brief.store import Entry, OrderedStore, iskey, isorder
from brief.utils import Unset


class TestOrderedStore(TestCase):

    def testInsertThenLookup(self):
        store = OrderedStore()
        store.insert("value", "key", 0)
        self.assertEqual(store.lookup("key"), "value")
        self.assertIn("key", store)

    def testLookupMissingUsesDefault(self):
        store = OrderedStore()
        self.assertIsNone(store.lookup("missing"))
        self.assertEqual(store.lookup("missing", "fallback"), "fallback")
        self.assertIsNone(store.lookup(["unhashable"]))

    def testKeySynthesisedFromNextOrder(self):
        store = OrderedStore()
        first = store.insert("a")
        second = store.insert("b")
        self.assertEqual(first, Entry(0, "a", 0))
        self.assertEqual(second, Entry(1, "b", 1))

    def testKeyDefaultsToExplicitOrder(self):
        store = OrderedStore()
        self.assertEqual(store.insert("a", Unset, 7), Entry(7, "a", 7))

    def testOverwriteKeepsKeyedPosition(self):
        store = OrderedStore()
        store.insert(1, "a", 0)
        store.insert(2, "b", 1)
        store.insert(3, "a", 2)
        self.assertEqual(store.keys(), ["a", "b"])
        self.assertEqual(store.keyed(), {"a": 3, "b": 2})
        self.assertEqual(store.ordered(), [2, 3])

    def testEmptyStoreLimits(self):
        store = OrderedStore()
        self.assertEqual(store.highestorder(), -1)
        self.assertEqual(store.lowestorder(), 0)
        self.assertEqual(store.nextorder(), 0)
        self.assertEqual(store.ordered(), [])
        self.assertEqual(store.keyed(), {})

    def testOrderLimits(self):
        store = OrderedStore()
        store.insert("a", "a", 3)
        store.insert("b", "b", 9)
        self.assertEqual(store.lowestorder(), 3)
        self.assertEqual(store.highestorder(), 9)
        self.assertEqual(store.nextorder(), 10)

    def testOrderedFillsGaps(self):
        store = OrderedStore()
        store.insert("zero", "x", 0)
        store.insert("two", "y", 2)
        self.assertEqual(store.ordered(), ["zero", None, "two"])
        self.assertEqual(store.ordered("gap"), ["zero", "gap", "two"])

    def testOrderedStartsAtLowestOrder(self):
        store = OrderedStore()
        store.insert("b", "b", 5)
        store.insert("a", "a", 4)
        self.assertEqual(store.ordered(), ["a", "b"])

    def testRemoveLeavesGap(self):
        store = OrderedStore()
        for index, value in enumerate("abc"):
            store.insert(value, value, index)
        store.remove("b")
        store.remove("missing")
        self.assertEqual(store.ordered(), ["a", None, "c"])
        self.assertEqual(len(store), 2)

    def testSortedByOrder(self):
        store = OrderedStore()
        store.insert("late", "late", 4)
        store.insert("early", "early", 1)
        self.assertEqual([entry.key for entry in store.sortedbyorder()], ["early", "late"])

    def testCopyIsIndependent(self):
        store = OrderedStore()
        store.insert("value", "key", 0)
        clone = store.copy()
        clone.insert("other", "key", 1)
        clone.insert("new", "fresh", 2)
        self.assertEqual(store.keyed(), {"key": "value"})
        self.assertEqual(clone.keyed(), {"key": "other", "fresh": "new"})

    def testBuildFromEntries(self):
        store = OrderedStore([Entry("a", 1, 0), ("b", 2, 1)])
        self.assertEqual(store.keyed(), {"a": 1, "b": 2})
        self.assertEqual(store, OrderedStore([("a", 1, 0), ("b", 2, 1)]))

    def testHolder(self):
        store = OrderedStore([("a", 1, 0), (2, "b", 2)])
        self.assertEqual(store.holder(0), "a")
        self.assertEqual(store.holder(2), 2)
        self.assertIsNone(store.holder(1))
        self.assertIsNone(OrderedStore().holder(0))


class TestPredicates(TestCase):

    def testIsKey(self):
        for key in ("", "name", 0, 7, -1):
            with self.subTest(key=key):
                self.assertTrue(iskey(key))
        for key in (True, False, 1.5, None, (1,), ["k"]):
            with self.subTest(key=key):
                self.assertFalse(iskey(key))

    def testIsOrder(self):
        for order in (0, 1, 1000):
            with self.subTest(order=order):
                self.assertTrue(isorder(order))
        for order in (-1, True, False, 1.0, "1", None):
            with self.subTest(order=order):
                self.assertFalse(isorder(order))



if __name__ == "__main__":
    unittest.main()
