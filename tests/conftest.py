# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import pathlib

import pytest

DATA_DIR = pathlib.Path(__file__).parent / "data"


@pytest.fixture
def sample_log_path():
    return DATA_DIR / "two_device.log"


@pytest.fixture
def sample_log(sample_log_path):
    return sample_log_path.read_text(encoding="utf-8")


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run from an empty directory so log and result files land in tmp_path."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("MMAPEAK_LOG_FILE", str(tmp_path / "mmapeak.log"))
    return tmp_path
