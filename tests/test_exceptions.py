#!/usr/bin/env python3

# Copyright (C) 2021-2022 The elglib developers
#
# This file is part of elglib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of elglib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `elglib.exceptions` module."

import pytest

from elglib.exceptions import (
    DiscreteLogNotFound,
    ElglibRuntimeError,
    ElglibValueError,
    InvalidModulus,
    NoInverseExists,
    NonceRecoveryFailed,
)


def test_hierarchy() -> None:
    for err in (InvalidModulus, NoInverseExists):
        assert issubclass(err, ElglibValueError)
        assert issubclass(err, ValueError)
    for err in (DiscreteLogNotFound, NonceRecoveryFailed):
        assert issubclass(err, ElglibRuntimeError)
        assert issubclass(err, RuntimeError)

    with pytest.raises(ValueError, match="no inverse"):
        raise NoInverseExists("no inverse")
