# gatuple: Geometric Algebra Tuple Engine
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

import unittest

import torch

from algebra.blade import SCALAR, e1, e2, e3, e4
from algebra.element import GradedElement
from algebra.multivector import Multivector
from algebra.validation import BladeRangeError, NarrowingError


class TestMultivectorSlots(unittest.TestCase):
    def test_default_is_zero(self):
        mv = Multivector(e1 ^ e2 ^ e3)
        self.assertEqual(len(mv), 8)
        self.assertTrue(torch.equal(mv.tensor, torch.zeros(8)))

    def test_assign_and_accumulate(self):
        mv = Multivector(e1 ^ e2)
        mv.assign(GradedElement(e1, 2.0))
        mv += GradedElement(e1, 0.5)
        mv.accumulate(e1 ^ e2, 3.0)
        mv[e2] = -1.0
        self.assertEqual(mv[e1], 2.5)
        self.assertEqual(mv[e2], -1.0)
        self.assertEqual(mv.at(e1 ^ e2), GradedElement(e1 ^ e2, 3.0))

    def test_out_of_range_slot(self):
        mv = Multivector(e1 ^ e2)
        with self.assertRaises(BladeRangeError):
            mv += GradedElement(e3, 1.0)
        with self.assertRaises(BladeRangeError):
            mv.at(e3)
        with self.assertRaises(BladeRangeError):
            mv[e3] = 1.0

    def test_traversal_order(self):
        mv = GradedElement(e1, 1.0) + GradedElement(e2 ^ e3, 2.0)
        seen = []
        mv.for_each(seen.append)
        self.assertEqual([el.blade for el in seen], list(range(8)))
        occupied = list(mv.occupied())
        self.assertEqual([el.blade for el in occupied], [e1, e2 ^ e3])

    def test_bad_tensor_shape(self):
        with self.assertRaises(ValueError):
            Multivector(e1 ^ e2, torch.zeros(3))


class TestMultivectorCopy(unittest.TestCase):
    def test_widening_copy(self):
        mv = GradedElement(e1, 1.0) + GradedElement(e2, 2.0)
        wide = mv.embed(e1 ^ e2 ^ e3 ^ e4)
        self.assertEqual(wide.bound, e1 ^ e2 ^ e3 ^ e4)
        self.assertTrue(wide.isclose(mv))
        # Deep copy: no aliasing
        wide[e1] = 9.0
        self.assertEqual(mv[e1], 1.0)

    def test_narrowing_rejected(self):
        mv = Multivector(e1 ^ e2 ^ e3)
        with self.assertRaises(NarrowingError):
            mv.embed(e1 ^ e2)
        with self.assertRaises(NarrowingError):
            Multivector.from_multivector(mv, e2)

    def test_accumulate_larger_tuple_rejected(self):
        small = Multivector(e1 ^ e2)
        with self.assertRaises(BladeRangeError):
            small += Multivector(e1 ^ e2 ^ e3)


class TestMultivectorSums(unittest.TestCase):
    def test_heterogeneous_sum(self):
        mv = GradedElement(e1, 2.0) + GradedElement(e2 ^ e3, 3.0) + GradedElement(e4, 1.0)
        self.assertEqual(mv.bound, e1 ^ e2 ^ e3 ^ e4)
        self.assertEqual(mv[e1], 2.0)
        self.assertEqual(mv[e2 ^ e3], 3.0)
        self.assertEqual(mv[e4], 1.0)

    def test_tuple_plus_tuple(self):
        a = GradedElement(e1, 1.0) + GradedElement(e2, 1.0)
        b = GradedElement(e3, 4.0) + 2.0
        c = a + b
        self.assertEqual(c.bound, e1 ^ e2 ^ e3)
        self.assertEqual(c[SCALAR], 2.0)
        self.assertEqual(c[e3], 4.0)
        # Operands untouched
        self.assertEqual(a.bound, e1 ^ e2)

    def test_value_equality(self):
        a = GradedElement(e1, 1.0) + GradedElement(e2, 2.0)
        self.assertEqual(a, a.copy())
        self.assertEqual(a, a.embed(e3))
        self.assertNotEqual(a, a * 2)
        self.assertEqual(Multivector.from_element(GradedElement(e2, 2.0)), GradedElement(e2, 2.0))
        with self.assertRaises(TypeError):
            hash(a)

    def test_subtraction_and_negation(self):
        a = GradedElement(e1, 1.0) + GradedElement(e2, 1.0)
        self.assertTrue((a - a).isclose(Multivector(e1 ^ e2)))
        self.assertEqual((-a)[e2], -1.0)


class TestMultivectorProducts(unittest.TestCase):
    def test_vector_geometric_product(self):
        # (e1 + e2)(e1 - e2) = 1 - e1e2 + e2e1 - 1 = -2 e1e2
        a = GradedElement(e1, 1.0) + GradedElement(e2, 1.0)
        b = GradedElement(e1, 1.0) - GradedElement(e2, 1.0)
        c = a * b
        self.assertAlmostEqual(c[SCALAR], 0.0)
        self.assertAlmostEqual(c[e1 ^ e2], -2.0)

    def test_inner_plus_outer_is_geometric_for_vectors(self):
        a = GradedElement(e1, 2.0) + GradedElement(e2, -1.0) + GradedElement(e3, 0.5)
        b = GradedElement(e1, 1.0) + GradedElement(e2, 3.0) + GradedElement(e3, -2.0)
        self.assertTrue((a * b).isclose((a | b) + (a ^ b), atol=1e-5))
        # a . b = 2 - 3 - 1 = -2
        self.assertAlmostEqual((a | b)[SCALAR], -2.0, places=5)

    def test_element_operands_keep_order(self):
        a = GradedElement(e1, 1.0) + GradedElement(e2, 0.0)
        left = GradedElement(e2, 1.0) * a
        right = a * GradedElement(e2, 1.0)
        self.assertAlmostEqual(left[e1 ^ e2], -1.0)
        self.assertAlmostEqual(right[e1 ^ e2], 1.0)

    def test_outer_nilpotent(self):
        a = GradedElement(e1, 1.0) + GradedElement(e2, 2.0) + GradedElement(e3, 3.0)
        self.assertTrue((a ^ a).isclose(Multivector(a.bound)))

    def test_scaling(self):
        a = GradedElement(e1, 1.0) + GradedElement(e2, 2.0)
        self.assertEqual((a * 2)[e2], 4.0)
        self.assertEqual((0.5 * a)[e2], 1.0)

    def test_number_operands_scale(self):
        a = GradedElement(SCALAR, 3.0) + GradedElement(e1, 1.0) + GradedElement(e2, 2.0)
        self.assertTrue((a ^ 2.0).isclose(a * 2.0))
        self.assertTrue((2.0 ^ a).isclose(a * 2.0))
        self.assertTrue((2.0 | a).isclose(a * 2.0))
        # Only the scalar part contracts onto a number
        right = a | 2.0
        self.assertEqual(right.bound, a.bound)
        self.assertEqual(right[SCALAR], 6.0)
        self.assertEqual(right[e1], 0.0)
        self.assertEqual(right[e2], 0.0)

    def test_product_bound(self):
        a = GradedElement(e1, 1.0) + GradedElement(e2, 1.0)
        b = GradedElement(e3, 1.0) + 1.0
        self.assertEqual((a * b).bound, e1 ^ e2 ^ e3)

    def test_product_overflow_raises(self):
        # A tuple bounded at e3 may hold e1^e2; times e3 that needs slot e1^e2^e3
        a = Multivector(e3)
        a[e1 ^ e2] = 1.0
        b = Multivector.from_element(GradedElement(e3, 1.0))
        with self.assertRaises(BladeRangeError):
            a * b
        # A zero coefficient in that slot loses nothing
        a[e1 ^ e2] = 0.0
        self.assertEqual((a * b).bound, e3)


if __name__ == '__main__':
    unittest.main()
