#!/usr/bin/env python3
# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import logging

from mmapeak.lib.reporter_factory import ReporterFactory

from .command import load_result, MMAPeakCommand

logger = logging.getLogger(__name__)


class ParseCommand(MMAPeakCommand):
    def populate_parser(self, subparsers):
        parser = subparsers.add_parser("parse", help="parse benchmark logs")
        parser.set_defaults(command=self)
        parser.add_argument(
            "logs", nargs="+", help='mmapeak log files, "-" reads stdin'
        )
        parser.add_argument(
            "-R",
            "--reporter",
            choices=ReporterFactory.registered_names,
            default="stdout",
            help="how to publish the parsed results",
        )

    def run(self, args, config):
        reporter = ReporterFactory.create(args.reporter, args.results)

        for source in args.logs:
            logger.info('Parsing "%s"', source)
            result = load_result(source, config)
            if len(result.performance_data) == 0:
                logger.warning('No benchmark samples found in "%s"', source)
            reporter.report(source, result)

        reporter.close()
