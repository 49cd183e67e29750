#!/usr/bin/env python3
# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

"""Display helpers for benchmark samples."""

import math
from decimal import Context, Decimal, ROUND_HALF_UP

HIGH = "high"
MEDIUM = "medium"
LOW = "low"

HIGH_TFLOPS = 1000
MEDIUM_TFLOPS = 500

# wide enough for every finite float
_CONTEXT = Context(prec=400)


def to_fixed(value: float, digits: int) -> str:
    """Render value with a fixed number of decimals.

    Ties on the exact binary value round away from zero, so 0.25 renders as
    "0.3" rather than Python's "0.2". Negative values keep their sign even
    when they round to zero ("-0.0"); negative zero itself renders unsigned.
    Values of 1e21 and above are written out in full, never in exponent form.
    """
    if not math.isfinite(value):
        return f"{value:.{digits}f}"
    quantum = Decimal(1).scaleb(-digits)
    rounded = Decimal(value).quantize(
        quantum, rounding=ROUND_HALF_UP, context=_CONTEXT
    )
    if rounded == 0 and not value < 0:
        rounded = abs(rounded)
    return f"{rounded:f}"


def format_time(ms: float) -> str:
    if ms < 1000:
        return f"{to_fixed(ms, 1)} ms"
    return f"{to_fixed(ms / 1000, 3)} s"


def format_tflops(tflops: float) -> str:
    if tflops >= 1000:
        return f"{to_fixed(tflops / 1000, 1)}K TFLOPS"
    return f"{to_fixed(tflops, 1)} TFLOPS"


def get_performance_level(tflops: float) -> str:
    if tflops > HIGH_TFLOPS:
        return HIGH
    if tflops > MEDIUM_TFLOPS:
        return MEDIUM
    return LOW
