import unittest

from monkey.runtime.environment import Environment
from monkey.runtime.object import TRUE, Integer


class EnvironmentTestCase(unittest.TestCase):

    def test_get_set(self):
        env = Environment()
        self.assertIsNone(env.get("a"))

        env.set("a", Integer(1))
        self.assertEqual(Integer(1), env.get("a"))

        env.set("a", TRUE)  # overwrite
        self.assertEqual(TRUE, env.get("a"))

    def test_enclosed_lookup(self):
        outer = Environment()
        outer.set("a", Integer(1))

        inner = Environment.create_enclosed(outer)
        inner.set("b", Integer(2))
        innermost = Environment.create_enclosed(inner)

        self.assertIs(outer, inner.outer)
        self.assertEqual(Integer(1), innermost.get("a"))
        self.assertEqual(Integer(2), innermost.get("b"))
        self.assertIsNone(innermost.get("c"))
        self.assertIsNone(outer.get("b"))

    def test_set_shadows(self):
        outer = Environment()
        outer.set("a", Integer(1))

        inner = Environment.create_enclosed(outer)
        inner.set("a", Integer(2))

        self.assertEqual(Integer(2), inner.get("a"))
        self.assertEqual(Integer(1), outer.get("a"))

    def test_shared_outer(self):
        outer = Environment()
        first, second = Environment.create_enclosed(outer), Environment.create_enclosed(outer)

        outer.set("a", Integer(1))
        self.assertEqual(Integer(1), first.get("a"))
        self.assertEqual(Integer(1), second.get("a"))

        outer.set("a", Integer(5))
        self.assertEqual(Integer(5), first.get("a"))
        self.assertEqual(Integer(5), second.get("a"))

    def test_equality(self):
        first, second = Environment(), Environment()
        self.assertEqual(first, second)

        first.set("a", Integer(1))
        self.assertNotEqual(first, second)

        second.set("a", Integer(1))
        self.assertEqual(first, second)

        self.assertNotEqual(Environment.create_enclosed(first), Environment())
        self.assertEqual(Environment.create_enclosed(first), Environment.create_enclosed(second))


if __name__ == '__main__':
    unittest.main()
