#!/usr/bin/env python3

# Copyright (C) 2021-2022 The elglib developers
#
# This file is part of elglib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of elglib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

The base classes are only meant to discriminate between Exceptions
being raised by elglib from those raised by other codebase.
Users are usually better off just dealing with the regular
ValueError, TypeError, and RuntimeError
from which the elglib versions are derived.

The specialized classes name the failures a caller of the
ElGamal analysis may want to tell apart:

* InvalidModulus: non-positive modulus
* NoInverseExists: gcd(a, m) != 1
* DiscreteLogNotFound: no exponent maps alpha to beta
* NonceRecoveryFailed: no candidate nonce reproduces s1
"""


class ElglibValueError(ValueError):
    pass


class ElglibTypeError(TypeError):
    pass


class ElglibRuntimeError(RuntimeError):
    pass


class InvalidModulus(ElglibValueError):
    pass


class NoInverseExists(ElglibValueError):
    pass


class DiscreteLogNotFound(ElglibRuntimeError):
    pass


class NonceRecoveryFailed(ElglibRuntimeError):
    pass
