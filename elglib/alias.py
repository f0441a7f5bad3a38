#!/usr/bin/env python3

# Copyright (C) 2021-2022 The elglib developers
#
# This file is part of elglib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of elglib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Tuple, Union

# hex-string or bytes representation of an int
#
# e.g. the six integers (alpha, beta, p, m, s1, s2) of a signature
# analysis may be provided as:
# 5
# "0x05"
# "05"
# b"\x05"
#
# use elglib.utils.int_from_integer to convert Integer to int
Integer = Union[bytes, str, int]

# Return value of number_theory.xgcd: (g, x, y) with a*x + b*y = g
XgcdResult = Tuple[int, int, int]
