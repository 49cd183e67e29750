#!/usr/bin/env python3
# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import errno
import os
import pathlib
import sys

STDIN_SOURCE = "-"


def create_results_dir(results_dir):
    try:
        os.makedirs(results_dir)
    except OSError as exc:
        if exc.errno != errno.EEXIST:
            raise
        pass
    return results_dir


def source_stem(source):
    """Name used for files derived from a parsed log."""
    if source == STDIN_SOURCE:
        return "stdin"
    return pathlib.Path(source).stem.replace(" ", "_")


def read_log(source):
    """Read a whole benchmark log, "-" meaning stdin."""
    if source == STDIN_SOURCE:
        return sys.stdin.read()
    with open(source, "r", encoding="utf-8", errors="replace") as log_file:
        return log_file.read()
