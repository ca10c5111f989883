#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Base24 codec.

Every 4 raw bytes (one big-endian uint32) become 7 symbols of a 24-letter
alphabet that leaves out look-alike characters (0/O, 1/I/L, ...).
Decode accepts lowercase symbols; encode always emits the canonical case.
"""

from __future__ import annotations

import struct
from typing import Dict, Tuple, Union

from .errors import DecodeInputLengthInvalid, DecodeUnsupportedCharacter, EncodeInputLengthInvalid

ALPHABET = "ZAC2B3EF4GH5TK67P8RS9WXY"
ALPHABET_LENGTH = len(ALPHABET)
BYTES_PER_CHUNK = 4
CHARS_PER_CHUNK = 7

_U32_MASK = 0xFFFFFFFF


def _build_tables(alphabet: str) -> Tuple[Tuple[str, ...], Dict[str, int]]:
    forward = tuple(alphabet)
    reverse: Dict[str, int] = {}
    for idx, ch in enumerate(alphabet):
        reverse[ch] = idx
        reverse.setdefault(ch.lower(), idx)
    return forward, reverse


_ENCODE_TABLE, _DECODE_TABLE = _build_tables(ALPHABET)

BytesLike = Union[bytes, bytearray, memoryview]


class Base24Codec:
    """Stateless Base24 encoder/decoder over the module-level lookup tables.

    Instances hold no mutable state, so one instance can be shared freely
    between threads.
    """

    __slots__ = ()

    def encode(self, data: BytesLike) -> str:
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError("data must be bytes-like")
        raw = bytes(data)
        if len(raw) % BYTES_PER_CHUNK != 0:
            raise EncodeInputLengthInvalid()
        words = struct.unpack(f">{len(raw) // BYTES_PER_CHUNK}I", raw)
        out = []
        for value in words:
            group = []
            for _ in range(CHARS_PER_CHUNK):
                value, digit = divmod(value, ALPHABET_LENGTH)
                group.append(_ENCODE_TABLE[digit])
            group.reverse()
            out.append("".join(group))
        return "".join(out)

    def decode(self, text: str) -> bytes:
        if not isinstance(text, str):
            raise TypeError("text must be str")
        if len(text) % CHARS_PER_CHUNK != 0:
            raise DecodeInputLengthInvalid()
        # Full scan before any folding.
        for ch in text:
            if ch not in _DECODE_TABLE:
                raise DecodeUnsupportedCharacter(ch)
        words = []
        for start in range(0, len(text), CHARS_PER_CHUNK):
            acc = 0
            for ch in text[start:start + CHARS_PER_CHUNK]:
                acc = (acc * ALPHABET_LENGTH + _DECODE_TABLE[ch]) & _U32_MASK
            words.append(acc)
        return struct.pack(f">{len(words)}I", *words)

    def is_valid(self, text: str) -> bool:
        """True when `text` would decode without error."""
        if not isinstance(text, str):
            return False
        if len(text) % CHARS_PER_CHUNK != 0:
            return False
        return all(ch in _DECODE_TABLE for ch in text)


_SHARED = Base24Codec()


def encode(data: BytesLike) -> str:
    return _SHARED.encode(data)


def decode(text: str) -> bytes:
    return _SHARED.decode(text)


def is_valid(text: str) -> bool:
    return _SHARED.is_valid(text)
