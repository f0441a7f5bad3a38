#!/usr/bin/env python3

# Copyright (C) 2021-2022 The elglib developers
#
# This file is part of elglib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of elglib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Discrete logarithm in the multiplicative group of a prime field.

Shanks' baby-step/giant-step meet-in-the-middle algorithm:
with n = ceil(sqrt(p)), the exponent is searched as x = i*n - j,
for 1 <= i <= n and 0 <= j < n, matching the giant steps alpha^(i*n)
against the baby steps alpha^j * beta.

It takes O(sqrt(p)) time and space, so it is only practical for
small moduli: that is exactly the point of this exercise,
i.e. showing why ElGamal needs large primes.
"""

from math import isqrt
from typing import Dict

from elglib.exceptions import DiscreteLogNotFound
from elglib.number_theory import _assert_valid_modulo, mod_pow
from elglib.utils import int_repr


def _giant_steps(alpha: int, n: int, p: int) -> Dict[int, int]:
    # alpha^(i*n) -> i, the lowest i wins on collision
    table: Dict[int, int] = {}
    alpha_n = mod_pow(alpha, n, p)
    giant = 1
    for i in range(1, n + 1):
        giant = giant * alpha_n % p
        table.setdefault(giant, i)
    return table


def discrete_log(alpha: int, beta: int, p: int) -> int:
    """Return x in [0, p-1) such that alpha^x = beta (mod p).

    The first valid candidate found, in increasing baby-step order,
    is returned.
    """

    _assert_valid_modulo(p)

    n = isqrt(p)
    if n * n < p:
        n += 1

    table = _giant_steps(alpha, n, p)

    baby = beta % p
    for j in range(n):
        i = table.get(baby)
        if i is not None:
            x = i * n - j
            if x < p:
                # p-1 is the group order
                return x % (p - 1)
        baby = baby * alpha % p

    err_msg = f"no discrete log of {int_repr(beta)} "
    err_msg += f"in base {int_repr(alpha)} mod {int_repr(p)}"
    raise DiscreteLogNotFound(err_msg)
