#!/usr/bin/env python3

# Copyright (C) 2021-2022 The elglib developers
#
# This file is part of elglib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of elglib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the elglib package."

name = "elglib"
__version__ = "2022.5.3"
__author__ = "The elglib developers"
__author_email__ = "devs@elglib.org"
__copyright__ = "Copyright (C) 2021-2022 The elglib developers"
__license__ = "MIT License"
