#!/usr/bin/env python3
# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import json

import click
import tabulate

from mmapeak.lib.reporter import TABLE_FORMAT

from .command import MMAPeakCommand


class ListCommand(MMAPeakCommand):
    def populate_parser(self, subparsers):
        parser = subparsers.add_parser(
            "list", help="list all known operations and their descriptions"
        )
        parser.set_defaults(command=self)
        parser.add_argument("--json", action="store_true", help="print json format")

    def run(self, args, config):
        labels = config.operation_labels
        if args.json:
            click.echo(json.dumps(dict(labels), ensure_ascii=False))
            return
        click.echo(
            tabulate.tabulate(
                list(labels.items()),
                headers=["Operation", "Description"],
                tablefmt=TABLE_FORMAT,
                disable_numparse=True,
            )
        )
