#!/usr/bin/env python3

# Copyright (C) 2021-2022 The elglib developers
#
# This file is part of elglib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of elglib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""ElGamal signature analysis.

Given the public key (alpha, beta, p) and a signature (m, s1, s2):

1. the signature is verified
2. the private key x is recovered as discrete log of beta in base alpha
3. the nonce k is recovered from x and the signature

Verification never fails, while the two recoveries may fail
independently: a failure is reported in the Analysis result
as a typed exception, never as a placeholder value.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Type

from dataclasses_json import DataClassJsonMixin, config

from elglib.alias import Integer
from elglib.dlog import discrete_log
from elglib.elgamal import PubKey, Sig, verify
from elglib.exceptions import (
    DiscreteLogNotFound,
    ElglibRuntimeError,
    ElglibTypeError,
    ElglibValueError,
    InvalidModulus,
    NoInverseExists,
    NonceRecoveryFailed,
)
from elglib.nonce import recover_nonce
from elglib.utils import int_from_integer

_ERRORS: Dict[str, Type[Exception]] = {
    err.__name__: err
    for err in (
        ElglibValueError,
        ElglibTypeError,
        ElglibRuntimeError,
        InvalidModulus,
        NoInverseExists,
        DiscreteLogNotFound,
        NonceRecoveryFailed,
    )
}


def _encode_error(err: Optional[Exception]) -> Optional[str]:
    if err is None:
        return None
    return f"{type(err).__name__}: {err}"


def _decode_error(err_str: str) -> Exception:
    name, _, msg = err_str.partition(": ")
    if name not in _ERRORS:
        raise ElglibValueError(f"unknown error type: {name}")
    return _ERRORS[name](msg)


_ERROR_CONFIG = config(encoder=_encode_error, decoder=_decode_error)


@dataclass(frozen=True)
class Analysis(DataClassJsonMixin):
    """Result of an ElGamal signature analysis.

    prv_key is None if the discrete log was not found,
    nonce is None if the nonce was not recovered:
    in both cases the matching error field holds the reason.
    """

    verified: bool
    prv_key: Optional[int] = None
    nonce: Optional[int] = None
    prv_key_error: Optional[Exception] = field(
        default=None, compare=False, metadata=_ERROR_CONFIG
    )
    nonce_error: Optional[Exception] = field(
        default=None, compare=False, metadata=_ERROR_CONFIG
    )

    def __eq__(self, other: object) -> bool:
        # errors are compared by type and message
        if not isinstance(other, Analysis):
            return NotImplemented
        return self.to_dict() == other.to_dict()


def analyze(
    alpha: Integer, beta: Integer, p: Integer, m: Integer, s1: Integer, s2: Integer
) -> Analysis:
    "Verify the signature, then recover private key and nonce."

    alpha = int_from_integer(alpha)
    beta = int_from_integer(beta)
    p = int_from_integer(p)
    m = int_from_integer(m)
    s1 = int_from_integer(s1)
    s2 = int_from_integer(s2)

    verified = verify(alpha, beta, p, m, s1, s2)

    try:
        prv_key = discrete_log(alpha, beta, p)
    except (ElglibValueError, ElglibRuntimeError) as e:
        err = NonceRecoveryFailed("unknown private key")
        return Analysis(verified, prv_key_error=e, nonce_error=err)

    try:
        nonce = recover_nonce(alpha, beta, p, m, s1, s2, prv_key)
    except (ElglibValueError, ElglibRuntimeError) as e:
        return Analysis(verified, prv_key, nonce_error=e)

    return Analysis(verified, prv_key, nonce)


def analyze_sig(pub_key: PubKey, sig: Sig) -> Analysis:
    "Analyze a signature against its public key."

    return analyze(pub_key.alpha, pub_key.beta, pub_key.p, sig.m, sig.s1, sig.s2)
