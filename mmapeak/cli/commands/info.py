#!/usr/bin/env python3
# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

# pyre-unsafe

import json
import logging

import click
import tabulate
from mmapeak.lib.formatters import format_time, format_tflops
from mmapeak.lib.labels import get_operation_label
from mmapeak.lib.reporter import TABLE_FORMAT

from .command import load_result, MMAPeakCommand

logger = logging.getLogger(__name__)


class InfoCommand(MMAPeakCommand):
    def populate_parser(self, subparsers):
        parser = subparsers.add_parser(
            "info", help="Provides the results of one operation on every device."
        )
        parser.set_defaults(command=self)
        parser.add_argument("log", help='mmapeak log file, "-" reads stdin')
        parser.add_argument(
            "operation",
            help="Operation code. Use 'list' command to see known operations.",
        )
        parser.add_argument("--json", action="store_true", help="print json format")

    def run(self, args, config):
        result = load_result(args.log, config)
        samples = [p for p in result.performance_data if p.operation == args.operation]
        if len(samples) == 0:
            logger.warning('Operation "%s" not found in "%s"', args.operation, args.log)
            return

        if args.json:
            for p in samples:
                click.echo(json.dumps(p.to_dict(), ensure_ascii=False))
        else:
            self._print_as_table(args.operation, samples, config)

    def _print_as_table(self, operation, samples, config):
        table = [
            ["--- Operation ---", operation],
            ["Description", get_operation_label(operation, config.operation_labels)],
        ]
        for p in samples:
            table.append(["--- Device ---", p.device])
            table.append(["Time", format_time(p.time_ms)])
            table.append(["Throughput", format_tflops(p.tflops)])
            table.append(["Level", p.performance_level])

        click.echo(
            tabulate.tabulate(
                table,
                headers=["Properties", "Values"],
                tablefmt=TABLE_FORMAT,
                disable_numparse=True,
            )
        )
