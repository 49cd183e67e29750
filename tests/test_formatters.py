# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import pytest
from mmapeak.lib.formatters import (
    format_tflops,
    format_time,
    get_performance_level,
    to_fixed,
)


@pytest.mark.parametrize(
    "ms, expected",
    [
        (999.9, "999.9 ms"),
        (1000.0, "1.000 s"),
        (0, "0.0 ms"),
        (0.25, "0.3 ms"),
        (-0.01, "-0.0 ms"),
        (-0.0, "0.0 ms"),
        (2987.2, "2.987 s"),
        (2865.6, "2.866 s"),
        (12345678.9, "12345.679 s"),
    ],
)
def test_format_time(ms, expected):
    assert format_time(ms) == expected


@pytest.mark.parametrize(
    "tflops, expected",
    [
        (999.9, "999.9 TFLOPS"),
        (1000.0, "1.0K TFLOPS"),
        (999.96, "1000.0 TFLOPS"),
        (75.8, "75.8 TFLOPS"),
        (1462.4, "1.5K TFLOPS"),
        (1463.6, "1.5K TFLOPS"),
    ],
)
def test_format_tflops(tflops, expected):
    assert format_tflops(tflops) == expected


@pytest.mark.parametrize(
    "tflops, expected",
    [
        (1000, "medium"),
        (1000.1, "high"),
        (500, "low"),
        (500.1, "medium"),
        (0, "low"),
        (-1, "low"),
        (1462.4, "high"),
    ],
)
def test_get_performance_level(tflops, expected):
    assert get_performance_level(tflops) == expected


def test_to_fixed_rounds_ties_away_from_zero():
    assert to_fixed(0.5, 0) == "1"
    assert to_fixed(-0.5, 0) == "-1"
    assert to_fixed(1.25, 1) == "1.3"


def test_to_fixed_large_values():
    assert to_fixed(1e30, 1) == "1000000000000000019884624838656.0"
    assert to_fixed(float("inf"), 1) == "inf"
