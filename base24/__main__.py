#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from .cli import main


if __name__ == "__main__":
    raise SystemExit(main())
