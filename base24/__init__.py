#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
base24 package

Human-friendly binary-to-text codec: 4 bytes <-> 7 symbols over a
24-character alphabet without look-alike characters.
"""

from __future__ import annotations

from .codec import (
    ALPHABET,
    ALPHABET_LENGTH,
    BYTES_PER_CHUNK,
    CHARS_PER_CHUNK,
    Base24Codec,
    decode,
    encode,
    is_valid,
)
from .errors import (
    Base24Error,
    DecodeInputLengthInvalid,
    DecodeUnsupportedCharacter,
    EncodeInputLengthInvalid,
)

__version__ = "0.1.0"

__all__ = [
    "ALPHABET",
    "ALPHABET_LENGTH",
    "BYTES_PER_CHUNK",
    "CHARS_PER_CHUNK",
    "Base24Codec",
    "encode",
    "decode",
    "is_valid",
    "Base24Error",
    "EncodeInputLengthInvalid",
    "DecodeInputLengthInvalid",
    "DecodeUnsupportedCharacter",
]
