#!/usr/bin/env python3
# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import json
import logging
import os
import sys
from abc import ABCMeta, abstractmethod

import click
import pandas as pd
import tabulate

from mmapeak.lib import util
from mmapeak.lib.formatters import format_time, format_tflops

logger = logging.getLogger(__name__)

# Defines how the table is styled
TABLE_FORMAT = "plain"

DEVICE_HEADERS = ["Device", "Compute capability", "Memory", "Multiprocessors"]
SAMPLE_HEADERS = ["Operation", "Description", "Time", "Throughput", "Level"]


class Reporter(metaclass=ABCMeta):
    """A Reporter is used to publish parsed benchmark logs."""

    def __init__(self, results_dir="./results"):
        self.results_dir = results_dir

    @abstractmethod
    def report(self, source, result):
        """Publish one parsed log.

        Args:
            source (str): path of the log the result was parsed from
            result (ParseResult): devices and samples found in the log
        """
        pass

    @abstractmethod
    def close(self):
        """Do whatever necessary cleanup is required after all logs are reported."""
        pass


class StdoutReporter(Reporter):
    """Default reporter implementation, logs a JSON object to stdout."""

    def report(self, source, result):
        """Log JSON report to stdout.
        Attempt to detect whether a real person is running the program then
        pretty print the JSON, otherwise print it without linebreaks.
        """
        # use isatty as a proxy for if a real human is running this
        if sys.stdout.isatty():
            json.dump(result.to_dict(), sys.stdout, indent=2, ensure_ascii=False)
        else:
            json.dump(result.to_dict(), sys.stdout, ensure_ascii=False)
        sys.stdout.write("\n")

    def close(self):
        pass


class JSONFileReporter(Reporter):
    """Reporter implementation to save parsed results to a JSON file"""

    def report(self, source, result):
        json_filepath = os.path.join(
            util.create_results_dir(self.results_dir),
            "{}_results.json".format(util.source_stem(source)),
        )
        with open(json_filepath, "w+", encoding="utf-8") as json_fp:
            json.dump(result.to_dict(), json_fp, indent=2, ensure_ascii=False)
            json_fp.write("\n")
        logger.info('Wrote "%s"', json_filepath)

    def close(self):
        pass


class TableReporter(Reporter):
    """Print devices and samples as plain text tables"""

    def report(self, source, result):
        click.echo(f"=== {source} ===")
        click.echo(device_table(result.devices))
        for device in result.devices:
            samples = result.samples_for(device.name)
            if len(samples) == 0:
                continue
            click.echo("")
            click.echo(f"--- {device.name} ---")
            click.echo(sample_table(samples))

        device_names = {d.name for d in result.devices}
        unattributed = [
            p for p in result.performance_data if p.device not in device_names
        ]
        if len(unattributed) > 0:
            click.echo("")
            click.echo("--- unknown device ---")
            click.echo(sample_table(unattributed, with_device=True))

    def close(self):
        pass


class CSVFileReporter(Reporter):
    """Save a throughput matrix (operation x device, in TFLOPS) as CSV"""

    def report(self, source, result):
        csv_filepath = os.path.join(
            util.create_results_dir(self.results_dir),
            "{}_tflops.csv".format(util.source_stem(source)),
        )
        tflops_matrix(result).to_csv(csv_filepath)
        logger.info('Wrote "%s"', csv_filepath)

    def close(self):
        pass


def device_table(devices, table_format=TABLE_FORMAT):
    table = [
        [d.name, d.compute_capability, d.memory, d.multiprocessor_count]
        for d in devices
    ]
    return tabulate.tabulate(
        table,
        headers=DEVICE_HEADERS,
        tablefmt=table_format,
        disable_numparse=True,
    )


def sample_table(samples, table_format=TABLE_FORMAT, with_device=False):
    headers = SAMPLE_HEADERS
    if with_device:
        headers = ["Device"] + SAMPLE_HEADERS
    table = []
    for p in samples:
        row = [
            p.operation,
            p.operation_cn,
            format_time(p.time_ms),
            format_tflops(p.tflops),
            p.performance_level,
        ]
        if with_device:
            row = [p.device] + row
        table.append(row)
    return tabulate.tabulate(
        table, headers=headers, tablefmt=table_format, disable_numparse=True
    )


def tflops_matrix(result):
    """Pivot samples into a DataFrame indexed by operation, one column per device.

    Rows and columns keep the order in which they first appear in the log. A
    device measuring the same operation twice keeps its last sample.
    """
    df = pd.DataFrame(
        [p.to_dict() for p in result.performance_data],
        columns=["operation", "device", "tflops"],
    )
    if len(df) == 0:
        return pd.DataFrame(index=pd.Index([], name="operation"), dtype=float)
    operations = list(dict.fromkeys(df["operation"]))
    devices = list(dict.fromkeys(df["device"]))
    matrix = df.pivot_table(
        index="operation", columns="device", values="tflops", aggfunc="last"
    )
    matrix = matrix.reindex(index=operations, columns=devices)
    matrix.columns.name = None
    return matrix
