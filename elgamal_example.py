#!/usr/bin/env python3

# Copyright (C) 2021-2022 The elglib developers
#
# This file is part of elglib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of elglib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

from elglib.analysis import analyze
from elglib.elgamal import gen_keys, sign_

print("\n*** Group parameters:")
alpha, p = 5, 23
print(f"alpha: {alpha}")
print(f"    p: {p}")

print("\n1. Key generation")
x, pub_key = gen_keys(6, alpha, p)
print(f"prvkey: {x}")
print(f"  beta: {pub_key.beta}")

print("\n2. Sign message")
m = 17
sig = sign_(m, x, 3, alpha, p)
print(f"     m: {sig.m}")
print(f"    s1: {sig.s1}")
print(f"    s2: {sig.s2}")


def report(a: int, b: int, mod: int, msg: int, sig1: int, sig2: int) -> None:
    result = analyze(a, b, mod, msg, sig1, sig2)
    print(
        f"The signature verification {'passed' if result.verified else 'failed'}!"
    )
    if result.prv_key_error is None:
        print(f"Secret Key is {result.prv_key}.")
    else:
        print(f"Secret Key not found: {result.prv_key_error}")
    if result.nonce_error is None:
        print(f"The value of k is {result.nonce}.")
    else:
        print(f"The value of k not found: {result.nonce_error}")
    print(result.to_json())


print("\n3. Analyze signature")
report(pub_key.alpha, pub_key.beta, pub_key.p, sig.m, sig.s1, sig.s2)

print("\n4. Analyze signature with gcd(s2, p-1) = 11")
report(pub_key.alpha, pub_key.beta, pub_key.p, 5, 10, 11)

print("\n5. Analyze forged signature")
report(pub_key.alpha, pub_key.beta, pub_key.p, m, 10, 14)

print("\n6. Analyze public key outside the subgroup of 2 mod 7")
report(2, 3, 7, 1, 2, 1)
