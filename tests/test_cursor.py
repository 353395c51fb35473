from unittest import TestCase

from simple_vector.util import ConstCursor, Cursor


# -----------------------------------------------------------------------------


class TestCursor(TestCase):
    def setUp(self) -> 'None':
        self.storage = [10, 20, 30, 40]

    def test_dereference(self):
        c: 'ConstCursor[int]' = ConstCursor(self.storage, 1)
        self.assertEqual(20, c.value)
        self.assertEqual(40, c[2])
        self.assertEqual(10, c[-1])
        self.assertEqual(1, c.offs)

    def test_arithmetic(self):
        c: 'ConstCursor[int]' = ConstCursor(self.storage, 0)
        d = c + 3
        self.assertEqual(40, d.value)
        self.assertEqual(40, (3 + c).value)
        self.assertEqual(30, (d - 1).value)
        self.assertEqual(3, d - c)
        self.assertEqual(-3, c - d)
        self.assertEqual(20, c.next.value)
        self.assertEqual(30, d.prev.value)

    def test_ordering(self):
        c: 'ConstCursor[int]' = ConstCursor(self.storage, 1)
        d: 'ConstCursor[int]' = ConstCursor(self.storage, 2)
        self.assertTrue(c < d)
        self.assertTrue(c <= d)
        self.assertTrue(d > c)
        self.assertTrue(d >= c)
        self.assertEqual(c, d - 1)
        self.assertEqual(hash(c), hash(d - 1))

    def test_regions(self):
        c: 'ConstCursor[int]' = ConstCursor(self.storage, 0)
        d: 'ConstCursor[int]' = ConstCursor(list(self.storage), 0)
        self.assertFalse(c.same_region(d))
        self.assertNotEqual(c, d)
        self.assertNotEqual(c, 0)

    def test_mutable_cursor(self):
        c: 'Cursor[int]' = Cursor(self.storage, 1)
        c.value = 21
        (c + 1).value = 31
        c[2] = 41
        self.assertEqual([10, 21, 31, 41], self.storage)
        self.assertIsInstance(c + 1, Cursor)
        self.assertIsInstance(c - 1, Cursor)
        self.assertIsInstance(c.next, Cursor)

    def test_as_const(self):
        c: 'Cursor[int]' = Cursor(self.storage, 2)
        k = c.as_const()
        self.assertNotIsInstance(k, Cursor)
        self.assertEqual(c, k)
        self.assertEqual(30, k.value)


# -----------------------------------------------------------------------------
