#!/usr/bin/env python3

# Copyright (C) 2021-2022 The elglib developers
#
# This file is part of elglib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of elglib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""ElGamal digital signature over a prime field.

Textbook scheme, as in T. ElGamal, "A public key cryptosystem and a
signature scheme based on discrete logarithms", IEEE IT-31, 1985:

* group parameters: a prime p and a generator alpha of Z_p^*
* private key: 0 < x < p-1
* public key: beta = alpha^x (mod p)
* signature of the message representative m with nonce k,
  gcd(k, p-1) = 1:

    s1 = alpha^k (mod p)
    s2 = k^-1 (m - x*s1) (mod p-1)

* verification:

    alpha^m = beta^s1 * s1^s2 (mod p)

No message hashing is performed: m is used as is.
"""

import secrets
from dataclasses import InitVar, dataclass
from typing import Optional, Tuple

from dataclasses_json import DataClassJsonMixin

from elglib.exceptions import ElglibRuntimeError, ElglibValueError
from elglib.number_theory import mod_inv, mod_pow, negative_mod
from elglib.utils import int_repr

# small demo group: 5 is a generator of Z_23^*
ALPHA = 5
P = 23


@dataclass(frozen=True)
class PubKey(DataClassJsonMixin):
    """ElGamal public key.

    alpha is the group generator, 1 < alpha < p
    beta = alpha^x (mod p), 0 < beta < p
    p is the prime modulus (primality is not checked)
    """

    alpha: int
    beta: int
    p: int
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        if self.p < 3:
            raise ElglibValueError(f"invalid prime modulus: {int_repr(self.p)}")

        if not 1 < self.alpha < self.p:
            err_msg = "generator alpha not in 2..p-1: "
            err_msg += int_repr(self.alpha)
            raise ElglibValueError(err_msg)

        if not 0 < self.beta < self.p:
            err_msg = "public key beta not in 1..p-1: "
            err_msg += int_repr(self.beta)
            raise ElglibValueError(err_msg)


@dataclass(frozen=True)
class Sig(DataClassJsonMixin):
    """ElGamal signature, together with the signed message representative.

    No validity constraint is enforced: s1 and s2 are any integers,
    the verification equation being the only judge.
    """

    m: int
    s1: int
    s2: int


def gen_keys(
    prv_key: Optional[int] = None, alpha: int = ALPHA, p: int = P
) -> Tuple[int, PubKey]:
    "Return a private/public (int, PubKey) key-pair."

    if prv_key is None:
        # x in the range [1, p-2]
        x = 1 + secrets.randbelow(p - 2)
    else:
        x = prv_key
        if not 0 < x < p - 1:
            raise ElglibValueError(f"private key not in 1..p-2: {int_repr(x)}")

    beta = mod_pow(alpha, x, p)
    return x, PubKey(alpha, beta, p)


def sign_(
    m: int, prv_key: int, nonce: int, alpha: int = ALPHA, p: int = P
) -> Sig:
    """Sign the message representative m with the given nonce.

    The nonce must be coprime with the group order p-1,
    otherwise NoInverseExists is raised.
    """

    k_inv = mod_inv(nonce, p - 1)
    s1 = mod_pow(alpha, nonce, p)
    s2 = k_inv * negative_mod(m - prv_key * s1, p - 1) % (p - 1)
    return Sig(m, s1, s2)


def assert_as_valid(alpha: int, beta: int, p: int, m: int, s1: int, s2: int) -> None:
    # It raises Errors, while verify should always return True or False
    v1 = mod_pow(alpha, m, p)
    v2 = mod_pow(beta, s1, p) * mod_pow(s1, s2, p) % p
    if v1 != v2:
        raise ElglibRuntimeError("signature verification failed")


def verify(alpha: int, beta: int, p: int, m: int, s1: int, s2: int) -> bool:
    "ElGamal signature verification: alpha^m = beta^s1 * s1^s2 (mod p)."

    # all kind of Exceptions are catched because
    # verify must always return a bool
    try:
        assert_as_valid(alpha, beta, p, m, s1, s2)
    except Exception:  # pylint: disable=broad-except
        return False

    return True
