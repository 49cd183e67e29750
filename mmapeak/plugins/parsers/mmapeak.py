#!/usr/bin/env python3
# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

"""Parser for the text output of the mmapeak GPU matrix-multiply benchmark.

A run prints one block per device:

    ----------------------------------------
    Device 0: NVIDIA GeForce RTX 5090 D
      Compute capability: 12.0
      Total global memory: 31.8 GiB
      Multiprocessor count: 170
    Running benchmarks with target time: 3.0 seconds
    mma_s4s4s32_8_8_32
    run: 2987.2 ms 75.8 T(fl)ops
    ...

Parsing is best effort: lines that do not fit the layout are skipped and
never raise.
"""

import logging
import re
from typing import List, Mapping, Optional, Sequence

from mmapeak.lib.labels import get_operation_label
from mmapeak.lib.parser import Parser
from mmapeak.lib.records import DeviceInfo, ParseResult, PerformanceData

logger = logging.getLogger(__name__)

DEVICE_PREFIX = "Device "
DEVICE_REGEX = re.compile(r"Device (\d+): (.+)")
RUN_REGEX = re.compile(r"run:\s+([\d.]+)\s+ms\s+([\d.]+)\s+T\(fl\)ops")
OPERATION_REGEX = re.compile(r"^mma_")
LEADING_INT_REGEX = re.compile(r"\s*([+-]?\d+)")
LEADING_FLOAT_REGEX = re.compile(r"\d+(?:\.\d*)?|\.\d+")

COMPUTE_CAPABILITY = "Compute capability:"
TOTAL_GLOBAL_MEMORY = "Total global memory:"
MULTIPROCESSOR_COUNT = "Multiprocessor count:"

# number of lines after a device header that may carry its properties
DEVICE_DETAIL_LINES = 4

# lines containing any of these are never operation names
NON_OPERATION_MARKERS = (
    "run:",
    "Device",
    "Compute",
    "Total",
    "Multiprocessor",
    "Running",
    "---",
)

NO_DEVICE = -1


def device_display_name(raw_name: str, device_id: str) -> str:
    return f"{raw_name} (设备 {device_id})"


def fallback_device_name(device_index: int) -> str:
    return f"设备 {device_index}"


def _field_value(line: str) -> str:
    return line.split(":")[1].strip()


def _leading_int(text: str) -> int:
    match = LEADING_INT_REGEX.match(text)
    if match is None:
        return 0
    return int(match.group(1))


def _leading_float(text: str) -> Optional[float]:
    match = LEADING_FLOAT_REGEX.match(text)
    if match is None:
        return None
    return float(match.group(0))


def _split_lines(text: str) -> List[str]:
    return [line.strip() for line in text.split("\n")]


def _match_device_header(line: str):
    if not line.startswith(DEVICE_PREFIX):
        return None
    match = DEVICE_REGEX.search(line)
    if match is None:
        logger.debug('Skipping malformed device header "%s"', line)
    return match


def _is_operation_line(line: str) -> bool:
    if len(line) == 0:
        return False
    if any(marker in line for marker in NON_OPERATION_MARKERS):
        return False
    return OPERATION_REGEX.match(line) is not None


def parse_devices(text: str) -> List[DeviceInfo]:
    """Collect one DeviceInfo per "Device <id>: <name>" header, in log order.

    Properties are looked up in the DEVICE_DETAIL_LINES lines that follow the
    header; properties that are not found keep their defaults.
    """
    devices = []
    lines = _split_lines(text)

    for i, line in enumerate(lines):
        match = _match_device_header(line)
        if match is None:
            continue
        device_id, raw_name = match.groups()

        compute_capability = ""
        memory = ""
        multiprocessor_count = 0
        for detail in lines[i + 1 : i + 1 + DEVICE_DETAIL_LINES]:
            if COMPUTE_CAPABILITY in detail:
                compute_capability = _field_value(detail)
            elif TOTAL_GLOBAL_MEMORY in detail:
                memory = _field_value(detail)
            elif MULTIPROCESSOR_COUNT in detail:
                multiprocessor_count = _leading_int(_field_value(detail))

        devices.append(
            DeviceInfo(
                name=device_display_name(raw_name, device_id),
                compute_capability=compute_capability,
                memory=memory,
                multiprocessor_count=multiprocessor_count,
            )
        )

    return devices


def parse_performance(
    text: str,
    devices: Sequence[DeviceInfo],
    labels: Optional[Mapping[str, str]] = None,
) -> List[PerformanceData]:
    """Collect one PerformanceData per operation line followed by a run line.

    Samples are attributed to the device of the most recent header. A header
    id outside of ``devices`` gets a synthesized name instead of failing.
    """
    performance_data = []
    lines = _split_lines(text)

    current_device_index = NO_DEVICE
    current_device_name = fallback_device_name(NO_DEVICE)

    for i, line in enumerate(lines):
        match = _match_device_header(line)
        if match is not None:
            current_device_index = int(match.group(1))
            if current_device_index < len(devices):
                current_device_name = devices[current_device_index].name
            else:
                logger.debug(
                    "Device %d is not among the %d parsed devices",
                    current_device_index,
                    len(devices),
                )
                current_device_name = fallback_device_name(current_device_index)
            continue

        if not _is_operation_line(line):
            continue

        operation = line
        if i + 1 >= len(lines):
            logger.debug('Operation "%s" has no run line', operation)
            continue
        run_match = RUN_REGEX.search(lines[i + 1])
        if run_match is None:
            logger.debug('Operation "%s" is not followed by a run line', operation)
            continue

        time_ms = _leading_float(run_match.group(1))
        tflops = _leading_float(run_match.group(2))
        if time_ms is None or tflops is None:
            logger.debug('Unreadable run line "%s"', lines[i + 1])
            continue

        performance_data.append(
            PerformanceData(
                operation=operation,
                operation_cn=get_operation_label(operation, labels),
                device=current_device_name,
                time_ms=time_ms,
                tflops=tflops,
            )
        )

    return performance_data


def parse_result_data(
    text: str, labels: Optional[Mapping[str, str]] = None
) -> ParseResult:
    devices = parse_devices(text)
    performance_data = parse_performance(text, devices, labels)
    logger.debug(
        "Parsed %d devices and %d samples", len(devices), len(performance_data)
    )
    return ParseResult(
        devices=tuple(devices), performance_data=tuple(performance_data)
    )


class MMAPeakParser(Parser):
    def __init__(self, labels=None):
        self.labels = labels

    def parse_result(self, stdout):
        """Parse stdout lines into a ParseResult."""
        return parse_result_data("\n".join(stdout), self.labels)

    def parse(self, stdout, stderr, returncode):
        if returncode:
            logger.warning("mmapeak exited with return code %s", returncode)
        return self.parse_result(stdout).to_dict()
