#!/usr/bin/env python3

# Copyright (C) 2021-2022 The elglib developers
#
# This file is part of elglib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of elglib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""ElGamal nonce recovery from a known private key.

The signing equation

    m = x*s1 + k*s2 (mod p-1)

is linear in the nonce k: once the private key x is known
(leaked, or recovered with elglib.dlog) k can be computed from any
signature (m, s1, s2).

If c = gcd(s2, p-1) > 1 the inverse of s2 does not exist:
the congruence is reduced to

    k*(s2/c) = aux/c (mod (p-1)/c)

whose solution kt lifts to c distinct candidates modulo p-1;
the right one is the candidate reproducing s1 = alpha^k (mod p).
"""

from typing import Iterator

from elglib.exceptions import NonceRecoveryFailed
from elglib.number_theory import (
    _assert_valid_modulo,
    gcd,
    mod_inv,
    mod_pow,
    negative_mod,
)
from elglib.utils import int_repr


def _nonce_candidates(aux: int, s2: int, c: int, order: int) -> Iterator[int]:
    # the c solutions modulo order of k*s2 = aux, c divides aux
    modulo2 = order // c
    s2_inv = mod_inv(s2 // c, modulo2)
    kt = (aux // c) * s2_inv % modulo2
    for i in range(1, c + 1):
        yield kt + i * modulo2


def recover_nonce(
    alpha: int, beta: int, p: int, m: int, s1: int, s2: int, prv_key: int
) -> int:
    """Return the nonce k in [0, p-2] used to produce the signature.

    beta is not needed by the computation:
    it is accepted for symmetry with elglib.elgamal.verify.
    """
    # pylint: disable=unused-argument

    _assert_valid_modulo(p)
    order = p - 1
    _assert_valid_modulo(order)

    aux = negative_mod(m - prv_key * s1, order)
    s2 %= order
    c = gcd(s2, order)

    if c == 1:
        return mod_inv(s2, order) * aux % order

    # k*s2 = aux (mod p-1) is solvable only if c divides aux
    if aux % c:
        err_msg = "no nonce solves the signing equation: "
        err_msg += f"gcd(s2, p-1) = {int_repr(c)} does not divide {int_repr(aux)}"
        raise NonceRecoveryFailed(err_msg)

    for k in _nonce_candidates(aux, s2, c, order):
        if mod_pow(alpha, k, p) == s1:
            return k % order

    err_msg = f"none of the {c} nonce candidates matches "
    err_msg += f"s1 = {int_repr(s1)} mod {int_repr(p)}"
    raise NonceRecoveryFailed(err_msg)
