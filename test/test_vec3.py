from src.vecmath import \
    I, \
    J, \
    K, \
    Vec3
import math
from pydantic import ValidationError
import unittest


class TestVec3(unittest.TestCase):

    def test_unit_constants(self):
        self.assertEqual(I, Vec3(x=1.0, y=0.0, z=0.0))
        self.assertEqual(J, Vec3(x=0.0, y=1.0, z=0.0))
        self.assertEqual(K, Vec3(x=0.0, y=0.0, z=1.0))

    def test_integers_coerced_to_float(self):
        vector: Vec3 = Vec3(x=1, y=2, z=3)
        self.assertIsInstance(vector.x, float)
        self.assertEqual(vector, Vec3(x=1.0, y=2.0, z=3.0))

    def test_non_finite_components_accepted(self):
        vector: Vec3 = Vec3(x=math.inf, y=-math.inf, z=math.nan)
        self.assertEqual(vector.x, math.inf)
        self.assertEqual(vector.y, -math.inf)
        self.assertTrue(math.isnan(vector.z))

    def test_equality_is_componentwise(self):
        self.assertEqual(Vec3(x=1.0, y=2.0, z=3.0), Vec3(x=1.0, y=2.0, z=3.0))
        self.assertFalse(Vec3(x=1.0, y=2.0, z=3.0) == Vec3(x=1.0, y=2.0, z=3.5))
        self.assertEqual(Vec3(x=0.0, y=0.0, z=0.0), Vec3(x=-0.0, y=-0.0, z=-0.0))
        self.assertFalse(Vec3(x=1.0, y=2.0, z=3.0) == (1.0, 2.0, 3.0))

    def test_nan_is_not_equal_to_itself(self):
        vector: Vec3 = Vec3(x=math.nan, y=0.0, z=0.0)
        self.assertFalse(vector == vector)

    def test_hash_matches_equality(self):
        vectors: set[Vec3] = {
            Vec3(x=1, y=2, z=3),
            Vec3(x=1.0, y=2.0, z=3.0),
            Vec3(x=3.0, y=2.0, z=1.0)}
        self.assertEqual(len(vectors), 2)

    def test_frozen(self):
        vector: Vec3 = Vec3(x=1.0, y=2.0, z=3.0)
        with self.assertRaises(ValidationError):
            vector.x = 5.0
        self.assertEqual(vector.x, 1.0)

    def test_missing_component_rejected(self):
        with self.assertRaises(ValidationError):
            Vec3(x=1.0, y=2.0)
