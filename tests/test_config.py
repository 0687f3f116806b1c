# gatuple: Geometric Algebra Tuple Engine
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

import unittest

import torch

from algebra.blade import Blade, e1, e2, e4
from algebra.config import AlgebraConfig, get_config, reset_config, resolve_device, set_config
from algebra.element import GradedElement
from algebra.multivector import Multivector
from algebra.rules import product_sign
from algebra.validation import BladeRangeError


class TestAlgebraConfig(unittest.TestCase):
    def setUp(self):
        reset_config()

    def tearDown(self):
        reset_config()

    def test_defaults(self):
        config = get_config()
        self.assertEqual(config.max_generators, 9)
        self.assertEqual(config.torch_dtype, torch.float32)
        self.assertEqual(config.max_blade, 0x1FF)

    def test_validation(self):
        with self.assertRaises(ValueError):
            AlgebraConfig(max_generators=0)
        with self.assertRaises(ValueError):
            AlgebraConfig(max_generators=13)
        with self.assertRaises(ValueError):
            AlgebraConfig(dtype="quaternion")

    def test_generator_cap_is_checked(self):
        set_config(max_generators=3)
        Blade.generator(3)
        with self.assertRaises(BladeRangeError):
            Blade.generator(4)
        set_config(max_generators=12)
        self.assertEqual(Blade.generator(12).grade, 1)

    def test_sign_rule_rechecks_cap_after_lowering(self):
        # e4 e1 is already cached when the cap drops below e4
        self.assertEqual(product_sign(e4, e1), -1)
        set_config(max_generators=3)
        with self.assertRaises(BladeRangeError):
            product_sign(e4, e1)
        with self.assertRaises(BladeRangeError):
            product_sign(e1, e4)
        self.assertEqual(product_sign(e2, e1), -1)

    def test_dtype_override(self):
        set_config(dtype="float64")
        mv = GradedElement(e1, 1.0) + GradedElement(e2, 2.0)
        self.assertEqual(mv.tensor.dtype, torch.float64)
        self.assertEqual((mv * mv).tensor.dtype, torch.float64)
        self.assertEqual(Multivector(e1, dtype=torch.float16).tensor.dtype, torch.float16)

    def test_resolve_device(self):
        self.assertEqual(resolve_device("cpu"), "cpu")
        self.assertIn(resolve_device("auto"), ("cuda", "mps", "cpu"))


if __name__ == '__main__':
    unittest.main()
