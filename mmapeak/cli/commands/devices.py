#!/usr/bin/env python3
# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import click
from mmapeak.lib.reporter import device_table

from .command import load_result, MMAPeakCommand


class DevicesCommand(MMAPeakCommand):
    def populate_parser(self, subparsers):
        parser = subparsers.add_parser(
            "devices", help="list the devices found in a log"
        )
        parser.set_defaults(command=self)
        parser.add_argument("log", help='mmapeak log file, "-" reads stdin')

    def run(self, args, config):
        result = load_result(args.log, config)
        click.echo(device_table(result.devices))
