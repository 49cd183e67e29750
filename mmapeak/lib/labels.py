#!/usr/bin/env python3
# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

from typing import Mapping, Optional

from mmapeak.config import OPERATION_LABELS


def get_operation_label(
    operation: str, labels: Optional[Mapping[str, str]] = None
) -> str:
    """Describe an operation code, or return the code itself when unmapped."""
    if labels is None:
        labels = OPERATION_LABELS
    return labels.get(operation, operation)
