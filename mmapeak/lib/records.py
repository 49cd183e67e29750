#!/usr/bin/env python3
# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from mmapeak.lib.formatters import get_performance_level


@dataclass(frozen=True)
class DeviceInfo:
    """One GPU device announced by a "Device N: ..." header."""

    name: str
    compute_capability: str = ""
    memory: str = ""
    multiprocessor_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "computeCapability": self.compute_capability,
            "memory": self.memory,
            "multiprocessorCount": self.multiprocessor_count,
        }


@dataclass(frozen=True)
class PerformanceData:
    """One measured operation on one device."""

    operation: str
    operation_cn: str
    device: str
    time_ms: float
    tflops: float

    @property
    def time_sec(self) -> float:
        return self.time_ms / 1000

    @property
    def performance_level(self) -> str:
        return get_performance_level(self.tflops)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "operation": self.operation,
            "operationCN": self.operation_cn,
            "device": self.device,
            "timeMs": self.time_ms,
            "timeSec": self.time_sec,
            "tflops": self.tflops,
        }


@dataclass(frozen=True)
class ParseResult:
    devices: Tuple[DeviceInfo, ...] = ()
    performance_data: Tuple[PerformanceData, ...] = ()

    def samples_for(self, device_name: str) -> Tuple[PerformanceData, ...]:
        return tuple(p for p in self.performance_data if p.device == device_name)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "devices": [d.to_dict() for d in self.devices],
            "performanceData": [p.to_dict() for p in self.performance_data],
        }
