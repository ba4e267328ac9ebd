# SPDX-FileCopyrightText: Copyright (c) 2024 NVIDIA CORPORATION & AFFILIATES
# SPDX-License-Identifier: Apache-2.0
import dataclasses
import itertools
from fractions import Fraction

import numpy as np
import pytest

import su3fusion as su3


def all_irreps(max_row1: int):
    return [
        su3.SU3(row1, row2) for row1 in range(max_row1 + 1) for row2 in range(row1 + 1)
    ]


def hook_length_dimension(row1: int, row2: int) -> int:
    # dim = prod over boxes (N + content) / hook, with N = 3
    rows = [row1, row2]
    out = Fraction(1)
    for i, length in enumerate(rows):
        for j in range(length):
            arm = length - j - 1
            leg = sum(1 for other in rows[i + 1 :] if other > j)
            out *= Fraction(3 + j - i, arm + leg + 1)
    assert out.denominator == 1
    return int(out)


def test_construct():
    r = su3.SU3(3, 1)
    assert r.row1 == 3
    assert r.row2 == 1
    assert su3.construct_irrep(3, 1) == r

    r = su3.SU3(np.int64(2), np.int32(1))
    assert type(r.row1) is int
    assert r == su3.SU3(2, 1)


@pytest.mark.parametrize(
    "row1, row2", [(1, 2), (0, 1), (-1, -1), (0, -1), (3, -2), (1.5, 1), ("2", 1), (True, 0)]
)
def test_invalid(row1, row2):
    with pytest.raises(su3.ValidationError):
        su3.SU3(row1, row2)
    with pytest.raises(ValueError):
        su3.construct_irrep(row1, row2)


def test_frozen():
    r = su3.SU3(2, 1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        r.row1 = 5


def test_equality():
    assert su3.SU3(2, 1) == su3.SU3(2, 1)
    assert su3.SU3(2, 1) != su3.SU3(2, 2)
    assert len({su3.SU3(2, 1), su3.SU3(2, 1), su3.SU3(1, 0)}) == 2


@pytest.mark.parametrize(
    "row1, row2, dim",
    [(0, 0, 1), (1, 0, 3), (1, 1, 3), (2, 0, 6), (2, 2, 6), (2, 1, 8), (3, 0, 10), (4, 2, 27)],
)
def test_dimension(row1, row2, dim):
    r = su3.SU3(row1, row2)
    assert r.dim == dim
    assert su3.dimension(r) == dim


def test_dimension_hook_length():
    for r in all_irreps(15):
        assert r.dim == hook_length_dimension(r.row1, r.row2)


def test_nboxes_highest_weight():
    r = su3.SU3(5, 2)
    assert r.nboxes == su3.nboxes(r) == 7
    assert r.highest_weight == su3.highest_weight(r) == (3, 2)
    assert su3.highest_weight(su3.SU3(0, 0)) == (0, 0)


def test_dual():
    assert su3.dual(su3.SU3(1, 0)) == su3.SU3(1, 1)
    assert su3.dual(su3.SU3(1, 1)) == su3.SU3(1, 0)
    assert su3.dual(su3.SU3(2, 0)) == su3.SU3(2, 2)
    assert su3.dual(su3.SU3(2, 2)) == su3.SU3(2, 0)
    assert su3.dual(su3.SU3(2, 1)) == su3.SU3(2, 1)
    assert su3.dual(su3.SU3(0, 0)) == su3.SU3(0, 0)


def test_dual_involution():
    for r in all_irreps(20):
        assert r.dual().dual() == r
        assert r.dual().dim == r.dim
        assert r.dual().highest_weight == r.highest_weight[::-1]


def test_from_string():
    assert su3.SU3.from_string("[2, 1]") == su3.SU3(2, 1)
    assert su3.SU3.from_string(" [4,0] ") == su3.SU3(4, 0)
    assert su3.SU3.from_string("(1,1)") == su3.SU3(2, 1)
    assert su3.SU3.from_string("(0, 3)") == su3.SU3(3, 3)
    assert su3.SU3._from("[3, 1]") == su3.SU3(3, 1)
    assert su3.SU3._from((3, 1)) == su3.SU3(3, 1)

    with pytest.raises(ValueError):
        su3.SU3.from_string("8")
    with pytest.raises(su3.ValidationError):
        su3.SU3.from_string("[0, 1]")


def test_repr():
    assert repr(su3.SU3(0, 0)) == "[0, 0]"
    assert repr(su3.SU3(4, 2)) == "[4, 2]"


def test_iterator():
    expected = [
        (0, 0),
        (1, 0),
        (1, 1),
        (2, 0),
        (2, 2),
        (2, 1),
        (3, 0),
        (3, 3),
        (4, 0),
        (3, 1),
        (3, 2),
        (4, 4),
    ]
    first = list(itertools.islice(su3.SU3.iterator(), len(expected)))
    assert first == [su3.SU3(*x) for x in expected]
    assert first == sorted(first)


def test_iterator_complete():
    irreps = list(itertools.islice(su3.SU3.iterator(), 60))
    assert len(set(irreps)) == len(irreps)

    max_dim = irreps[-1].dim
    expected = [r for r in all_irreps(max_dim) if r.dim < max_dim]
    assert set(expected) <= set(irreps)


def test_trivial():
    assert su3.SU3.trivial() == su3.SU3(0, 0)
    assert su3.SU3(0, 0).is_trivial()
    assert not su3.SU3(1, 0).is_trivial()
    assert su3.SU3(0, 0).is_scalar()
    assert not su3.SU3(2, 1).is_scalar()


def test_sort_key_is_injective():
    irreps = all_irreps(40)
    assert len({r.sort_key() for r in irreps}) == len(irreps)


def test_order():
    assert su3.SU3(1, 0) < su3.SU3(1, 1)
    assert su3.SU3(3, 0) < su3.SU3(3, 3)
    assert su3.SU3(2, 1) < "[3, 0]"
    assert not su3.SU3(2, 1) < su3.SU3(2, 1)


def test_quadratic_casimir():
    assert su3.SU3(0, 0).quadratic_casimir() == 0
    assert su3.SU3(1, 0).quadratic_casimir() == Fraction(4, 3)
    assert su3.SU3(1, 1).quadratic_casimir() == Fraction(4, 3)
    assert su3.SU3(2, 1).quadratic_casimir() == 3
    assert su3.SU3(3, 0).quadratic_casimir() == 6


@pytest.mark.parametrize(
    "row1, row2, drawing",
    [
        (0, 0, "●"),
        (1, 0, "┌─┐\n└─┘"),
        (3, 0, "┌─┬─┬─┐\n└─┴─┴─┘"),
        (1, 1, "┌─┐\n├─┤\n└─┘"),
        (2, 1, "┌─┬─┐\n├─┼─┘\n└─┘"),
        (2, 2, "┌─┬─┐\n├─┼─┤\n└─┴─┘"),
        (3, 1, "┌─┬─┬─┐\n├─┼─┴─┘\n└─┘"),
    ],
)
def test_young_diagram(row1, row2, drawing):
    assert su3.SU3(row1, row2).young_diagram() == drawing


def test_iterator_dimensions():
    irreps = list(itertools.islice(su3.SU3.iterator(), 40))
    dims = [r.dim for r in irreps]
    assert dims == sorted(dims)
    assert [hook_length_dimension(r.row1, r.row2) for r in irreps] == dims
