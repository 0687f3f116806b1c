# gatuple: Geometric Algebra Tuple Engine
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

import pytest

from algebra.blade import SCALAR, e1, e2, e3, e4
from algebra.element import GradedElement
from algebra.multivector import Multivector
from geometry.dual import cross, dual, reversion_sign
from geometry.literals import E1, E2, E3, E4, E12, E23


def vec(x, y, z):
    return (x * E1) + (y * E2) + (z * E3)


@pytest.fixture
def space3():
    """Mixed-grade tuple spanning e1^e2^e3."""
    return 2.0 + E1(1.0) + E23(-3.0) + E12(0.5) + E3(4.0)


@pytest.fixture
def space4():
    return E1(1.0) + E2(2.0) + E3(3.0) + E4(1.0)


class TestReversionSign:
    @pytest.mark.parametrize("ps, expected", [
        (SCALAR, 1), (e1, 1), (e1 ^ e2, -1), (e1 ^ e2 ^ e3, -1), (e1 ^ e2 ^ e3 ^ e4, 1),
    ])
    def test_values(self, ps, expected):
        assert reversion_sign(ps) == expected


class TestDual:
    def test_vector_to_bivector(self, space3):
        d = dual(Multivector.from_element(E1(1.0), e1 ^ e2 ^ e3))
        # e1 | -e123 = -e23
        assert d[e2 ^ e3] == pytest.approx(-1.0)
        assert d.bound == e1 ^ e2 ^ e3

    def test_scalar_and_pseudoscalar_swap(self, space3):
        one = Multivector.from_element(GradedElement(SCALAR, 1.0), e1 ^ e2 ^ e3)
        d = dual(one)
        assert d[e1 ^ e2 ^ e3] == pytest.approx(-1.0)
        assert dual(d)[SCALAR] == pytest.approx(-1.0)

    def test_twice_in_3d_flips_sign(self, space3):
        """In 3-space I^2 = -1, so dual(dual(A)) = -A."""
        twice = dual(dual(space3))
        assert twice.isclose(-space3, atol=1e-5)

    def test_twice_in_4d_is_identity(self, space4):
        twice = dual(dual(space4))
        assert twice.isclose(space4, atol=1e-5)

    def test_method_shortcut(self, space4):
        assert space4.dual().isclose(dual(space4))


class TestCross:
    def test_basis(self):
        assert cross(E1(1.0), E2(1.0), e1 ^ e2 ^ e3) == GradedElement(e3, 1.0)
        assert cross(E2(1.0), E1(1.0), e1 ^ e2 ^ e3) == GradedElement(e3, -1.0)
        assert cross(E2(1.0), E3(1.0), e1 ^ e2 ^ e3) == GradedElement(e1, 1.0)

    def test_general_vectors(self):
        c = cross(vec(1.0, 2.0, 3.0), vec(4.0, 5.0, 6.0))
        assert c.isclose(vec(-3.0, 6.0, -3.0), atol=1e-5)

    def test_parallel_vectors(self):
        c = cross(vec(1.0, 2.0, 3.0), vec(2.0, 4.0, 6.0))
        assert list(c.occupied(1e-6)) == []
