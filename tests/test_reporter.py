# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import json

import pandas as pd
import pytest
from mmapeak.lib.reporter import (
    CSVFileReporter,
    device_table,
    JSONFileReporter,
    StdoutReporter,
    TableReporter,
    tflops_matrix,
)
from mmapeak.lib.reporter_factory import ReporterFactory
from mmapeak.plugins.parsers.mmapeak import parse_result_data


@pytest.fixture
def result(sample_log):
    return parse_result_data(sample_log)


def test_stdout_reporter(result, capsys):
    reporter = StdoutReporter()
    reporter.report("two_device.log", result)
    reporter.close()

    out = json.loads(capsys.readouterr().out)
    assert out == result.to_dict()


def test_json_file_reporter(result, tmp_path):
    reporter = JSONFileReporter(str(tmp_path / "results"))
    reporter.report("logs/two device.log", result)

    path = tmp_path / "results" / "two_device_results.json"
    with open(path, encoding="utf-8") as f:
        saved = json.load(f)
    assert saved == result.to_dict()

    # an existing results dir is reused
    reporter.report("logs/two device.log", result)


def test_table_reporter(result, capsys):
    TableReporter().report("two_device.log", result)

    out = capsys.readouterr().out
    assert "=== two_device.log ===" in out
    assert "--- NVIDIA GeForce RTX 5090 D (设备 0) ---" in out
    assert "--- NVIDIA GeForce RTX 5090 (设备 1) ---" in out
    assert "1.5K TFLOPS" in out
    assert "2.987 s" in out
    assert "high" in out
    assert "unknown device" not in out


def test_table_reporter_unattributed_samples(capsys):
    text = "mma_f16f16f16_16_16_16\nrun: 10.0 ms 1.5 T(fl)ops\n"
    TableReporter().report("-", parse_result_data(text))

    out = capsys.readouterr().out
    assert "--- unknown device ---" in out
    assert "设备 -1" in out
    assert "10.0 ms" in out


def test_device_table(result):
    table = device_table(result.devices)
    assert "Multiprocessors" in table
    assert "12.0" in table
    assert "31.8 GiB" in table
    assert "170" in table


def test_tflops_matrix(result):
    matrix = tflops_matrix(result)

    assert list(matrix.columns) == [d.name for d in result.devices]
    assert matrix.index[0] == "mma_s4s4s32_8_8_32"
    assert matrix.index[-1] == "mma_tf32tf32f32_16_16_8"
    assert matrix.shape == (20, 2)
    assert matrix.loc["mma_mxf4mxf4f32_16_8_64", result.devices[1].name] == 1462.4


def test_tflops_matrix_empty():
    matrix = tflops_matrix(parse_result_data(""))
    assert len(matrix) == 0


def test_csv_file_reporter(result, tmp_path):
    reporter = CSVFileReporter(str(tmp_path))
    reporter.report("two_device.log", result)

    df = pd.read_csv(tmp_path / "two_device_tflops.csv", index_col=0)
    assert df.shape == (20, 2)
    assert df.loc["mma_s4s4s32_8_8_32", "NVIDIA GeForce RTX 5090 (设备 1)"] == 79.5


def test_reporter_factory_unknown_name():
    with pytest.raises(KeyError):
        ReporterFactory.create("does_not_exist")


def test_reporter_factory_rejects_non_reporter():
    with pytest.raises(TypeError):
        ReporterFactory.register("bogus", dict)
