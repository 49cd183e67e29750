#!/usr/bin/env python3
# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

from .factory import BaseFactory
from .reporter import Reporter

ReporterFactory = BaseFactory(Reporter)
