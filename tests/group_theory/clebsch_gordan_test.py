# SPDX-FileCopyrightText: Copyright (c) 2024 NVIDIA CORPORATION & AFFILIATES
# SPDX-License-Identifier: Apache-2.0
import itertools

import numpy as np

import su3fusion as su3


def test_clebsch_gordan():
    irreps = list(itertools.islice(su3.SU3.iterator(), 4))

    for r1, r2, r3 in itertools.combinations_with_replacement(irreps, 3):
        C = su3.SU3.clebsch_gordan(r1, r2, r3)

        a1 = np.einsum("zijk,giu->gzujk", C, r1.X)
        a2 = np.einsum("zijk,gju->gziuk", C, r2.X)
        a3 = np.einsum("zijk,guk->gziju", C, r3.X)  # Note the transpose

        np.testing.assert_allclose(a1 + a2, a3, atol=1e-10, rtol=0)


def test_number_of_paths():
    # the number of intertwiners is the fusion multiplicity
    irreps = list(itertools.islice(su3.SU3.iterator(), 8))

    for r1, r2 in itertools.product(irreps[:5], repeat=2):
        fusion = su3.fuse(r1, r2)
        for r3 in irreps:
            C = su3.clebsch_gordan(r1, r2, r3)
            assert C.shape == (fusion.count(r3), r1.dim, r2.dim, r3.dim)


def test_adjoint():
    gluon = su3.SU3(2, 1)

    C = su3.clebsch_gordan(gluon, gluon, gluon)
    assert C.shape == (2, 8, 8, 8)
    np.testing.assert_allclose(
        np.einsum("zijk,wijk->zw", np.conj(C), C), np.eye(2), atol=1e-10
    )

    assert su3.clebsch_gordan(gluon, gluon, su3.SU3(3, 0)).shape[0] == 1
    assert su3.clebsch_gordan(gluon, gluon, su3.SU3(0, 0)).shape[0] == 1
    assert su3.clebsch_gordan(gluon, gluon, su3.SU3(2, 0)).shape[0] == 0


def test_examples():
    C = su3.clebsch_gordan(su3.SU3(1, 0), su3.SU3(1, 1), su3.SU3(2, 1))
    assert C.shape == (1, 3, 3, 8)

    C = su3.clebsch_gordan(su3.SU3(1, 0), su3.SU3(1, 0), su3.SU3(1, 0))
    assert C.shape == (0, 3, 3, 3)
