#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations


class Base24Error(ValueError):
    pass


class EncodeInputLengthInvalid(Base24Error):
    def __init__(self, msg: str = "Input data length must be a multiple of 4 bytes (32 bits)") -> None:
        super().__init__(msg)


class DecodeInputLengthInvalid(Base24Error):
    def __init__(self, msg: str = "Input data length must be a multiple of 7 chars") -> None:
        super().__init__(msg)


class DecodeUnsupportedCharacter(Base24Error):
    def __init__(self, char: str) -> None:
        super().__init__(f"Unsupported character in input: {char!r}")
        self.char = char
