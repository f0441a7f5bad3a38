#!/usr/bin/env python3

# Copyright (C) 2021-2022 The elglib developers
#
# This file is part of elglib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of elglib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `elglib.nonce` module."

from math import gcd

import pytest

from elglib.elgamal import sign_
from elglib.exceptions import InvalidModulus, NonceRecoveryFailed
from elglib.nonce import _nonce_candidates, recover_nonce


def test_recover_nonce() -> None:
    # p = 23, alpha = 5, x = 6, beta = 5^6 = 8, k = 3, s1 = 5^3 = 10
    # m = x*s1 + k*s2 (mod 22)
    assert recover_nonce(5, 8, 23, 17, 10, 15, 6) == 3
    # s2 is reduced mod p-1
    assert recover_nonce(5, 8, 23, 17, 10, 15 - 22, 6) == 3
    assert recover_nonce(5, 8, 23, 17, 10, 15 + 22, 6) == 3


def test_recover_nonce_not_coprime() -> None:
    # gcd(s2, p-1) = gcd(11, 22) = 11
    assert recover_nonce(5, 8, 23, 5, 10, 11, 6) == 3


def test_nonce_candidates() -> None:
    # k*11 = 11 (mod 22): every odd k, i.e. 11 candidates
    candidates = list(_nonce_candidates(11, 11, 11, 22))
    assert len(candidates) == 11
    assert len({k % 22 for k in candidates}) == 11
    for k in candidates:
        assert k * 11 % 22 == 11

    # k*14 = 2 (mod 22), c = 2
    candidates = list(_nonce_candidates(2, 14, 2, 22))
    assert len(candidates) == 2
    for k in candidates:
        assert k * 14 % 22 == 2


def test_recover_nonce_failure() -> None:
    # forged signature: k*14 = 2 (mod 22) has solutions 8 and 19,
    # but neither 5^8 nor 5^19 is 10 (mod 23)
    err_msg = "none of the 2 nonce candidates matches s1 = 10 mod 23"
    with pytest.raises(NonceRecoveryFailed, match=err_msg):
        recover_nonce(5, 8, 23, 18, 10, 14, 6)
    # it is a RuntimeError too: 7 = 5^19 is not an even power of 5
    with pytest.raises(RuntimeError, match="none of the 11 nonce candidates"):
        recover_nonce(5, 8, 23, 20, 7, 11, 6)


def test_recover_nonce_unsolvable() -> None:
    # k*0 = 1 (mod 22) has no solution, even if 5^0 = 1 = s1
    err_msg = "no nonce solves the signing equation: "
    with pytest.raises(NonceRecoveryFailed, match=err_msg):
        recover_nonce(5, 8, 23, 1, 1, 0, 0)
    # k*14 = 1 (mod 22), gcd(14, 22) = 2 does not divide 1
    with pytest.raises(NonceRecoveryFailed, match="= 2 does not divide 1"):
        recover_nonce(5, 8, 23, 17, 10, 14, 6)


def test_recover_nonce_satisfies_signing_equation() -> None:
    alpha, p = 2, 11
    order = p - 1
    for x in range(order):
        beta = pow(alpha, x, p)
        for m in range(order):
            for s1 in range(1, p):
                for s2 in range(order):
                    solutions = [
                        k
                        for k in range(order)
                        if (x * s1 + k * s2 - m) % order == 0
                        and pow(alpha, k, p) == s1
                    ]
                    if gcd(s2, order) == 1:
                        # the unique solution of the signing equation
                        k = recover_nonce(alpha, beta, p, m, s1, s2, x)
                        assert (x * s1 + k * s2 - m) % order == 0
                    elif solutions:
                        k = recover_nonce(alpha, beta, p, m, s1, s2, x)
                        assert k in solutions
                    else:
                        with pytest.raises(NonceRecoveryFailed):
                            recover_nonce(alpha, beta, p, m, s1, s2, x)


def test_recover_nonce_exhaustive() -> None:
    for alpha, p in ((5, 23), (2, 11), (2, 29)):
        assert len({pow(alpha, e, p) for e in range(p - 1)}) == p - 1
        for x in range(1, p - 1):
            beta = pow(alpha, x, p)
            for k in range(1, p - 1):
                if gcd(k, p - 1) != 1:
                    continue
                for m in range(p - 1):
                    sig = sign_(m, x, k, alpha, p)
                    nonce = recover_nonce(alpha, beta, p, sig.m, sig.s1, sig.s2, x)
                    assert nonce == k


def test_invalid_modulus() -> None:
    with pytest.raises(InvalidModulus, match="invalid modulus: 0"):
        recover_nonce(5, 8, 0, 17, 10, 15, 6)
    with pytest.raises(InvalidModulus, match="invalid modulus: 0"):
        recover_nonce(5, 8, 1, 17, 10, 15, 6)
