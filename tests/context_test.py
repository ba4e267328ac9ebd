# SPDX-FileCopyrightText: Copyright (c) 2024 NVIDIA CORPORATION & AFFILIATES
# SPDX-License-Identifier: Apache-2.0
import pytest

import su3fusion as su3


def test_default_notation():
    assert su3.get_notation_scope(False) is None
    assert repr(su3.SU3(3, 1)) == "[3, 1]"

    with pytest.raises(ValueError):
        su3.get_notation_scope()


def test_notation_context():
    gluon = su3.SU3(2, 1)
    with su3.assume(su3.weight):
        assert su3.get_notation_scope() == su3.weight
        assert repr(gluon) == "(1,1)"
        assert repr(su3.fuse(gluon, gluon)) == "(0,0)+2x(1,1)+(3,0)+(0,3)+(2,2)"

    assert repr(gluon) == "[2, 1]"


def test_notation_round_trip():
    irreps = su3.fuse(su3.SU3(3, 1), su3.SU3(2, 2))
    with su3.assume("weight"):
        text = repr(irreps)
    assert su3.Irreps(text) == irreps


def test_nested_context():
    with su3.assume(su3.weight):
        with su3.assume(su3.young):
            assert repr(su3.SU3(1, 1)) == "[1, 1]"
        assert repr(su3.SU3(1, 1)) == "(0,1)"
    assert su3.get_notation_scope(False) is None


def test_decorator():
    @su3.assume("weight")
    def func():
        assert su3.get_notation_scope() == su3.weight
        return repr(su3.SU3(4, 0))

    assert su3.get_notation_scope(False) is None
    assert func() == "(4,0)"
    assert su3.get_notation_scope(False) is None


def test_invalid_notation():
    with pytest.raises(ValueError):
        su3.assume("dynkin")

    with pytest.raises(ValueError):
        su3.IrrepNotation.as_notation("dynkin")


def test_label():
    assert su3.young.label(su3.SU3(5, 2)) == (5, 2)
    assert su3.weight.label(su3.SU3(5, 2)) == (3, 2)
    assert str(su3.young) == "[row1, row2]"
    assert str(su3.weight) == "(p,q)"
