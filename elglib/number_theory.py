#!/usr/bin/env python3

# Copyright (C) 2021-2022 The elglib developers
#
# This file is part of elglib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of elglib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Number theory and modular arithmetic functions.

Extended Euclidean algorithm implementation originally from
https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm
with the following modifications:

* type annotated python3
* explicit errors for non-positive moduli and missing inverses
* added extensive unit test
"""

from elglib.alias import XgcdResult
from elglib.exceptions import ElglibValueError, InvalidModulus, NoInverseExists
from elglib.utils import int_repr


def _assert_valid_modulo(modulo: int) -> None:
    if modulo <= 0:
        raise InvalidModulus(f"invalid modulus: {int_repr(modulo)}")


def mod_pow(base: int, exponent: int, modulo: int) -> int:
    """Return base^exponent (mod modulo).

    Square-and-multiply over the binary expansion of the exponent:
    the result is in [0, modulo).

    The exponent must be non-negative:
    use negative_mod to normalize it first.
    """

    _assert_valid_modulo(modulo)
    if exponent < 0:
        raise ElglibValueError(f"negative exponent: {int_repr(exponent)}")

    result = 1 % modulo
    x = base % modulo
    while exponent > 0:
        if exponent & 1:
            result = result * x % modulo
        exponent >>= 1
        x = x * x % modulo
    return result


def negative_mod(value: int, modulo: int) -> int:
    "Return the representative of value in [0, modulo), also for negative value."

    _assert_valid_modulo(modulo)
    return ((value % modulo) + modulo) % modulo


def xgcd(a: int, b: int) -> XgcdResult:
    """Return (g, x, y) such that a*x + b*y = g = gcd(a, b).

    based on Extended Euclidean Algorithm, see
    https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm
    """

    x0, x1, y0, y1 = 0, 1, 1, 0
    while a != 0:
        q, b, a = b // a, a, b % a
        y0, y1 = y1, y0 - q * y1
        x0, x1 = x1, x0 - q * x1
    return b, x0, y0


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of two non-negative integers.

    gcd(a, 0) is a, gcd(0, b) is b.
    """

    if a < 0 or b < 0:
        err_msg = f"negative gcd argument: ({int_repr(a)}, {int_repr(b)})"
        raise ElglibValueError(err_msg)
    while b != 0:
        a, b = b, a % b
    return a


def mod_inv(a: int, m: int) -> int:
    """Return the inverse of a (mod m). m does not have to be a prime.

    Based on Extended Euclidean Algorithm, see:
    https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm
    """

    _assert_valid_modulo(m)
    a %= m
    g, x, _ = xgcd(a, m)
    if g == 1:
        return x % m
    err_msg = f"No inverse for {int_repr(a)} mod {int_repr(m)}"
    raise NoInverseExists(err_msg)
