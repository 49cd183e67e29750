#!/usr/bin/env python3
# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.
import argparse
import logging
import os
import sys

from mmapeak import config, logging_config, PROJECT, VERSION
from mmapeak.lib.reporter import (
    CSVFileReporter,
    JSONFileReporter,
    StdoutReporter,
    TableReporter,
)
from mmapeak.lib.reporter_factory import ReporterFactory

from .commands.devices import DevicesCommand
from .commands.info import InfoCommand
from .commands.list import ListCommand
from .commands.parse import ParseCommand


logger = logging.getLogger(__name__)


def setup_parser():
    """Setup the commands and command line parser.

    Returns:
        setup parser (argparse.ArgumentParser)
    """
    commands = [
        ParseCommand(),
        DevicesCommand(),
        ListCommand(),
        InfoCommand(),
    ]

    parser = argparse.ArgumentParser(prog=PROJECT)
    parser.add_argument(
        "-l",
        "--labels",
        type=str,
        dest="labels_file",
        default=None,
        help="Optional override path to operation labels file",
    )

    subparsers = parser.add_subparsers(dest="command", help="subcommand to run")
    for command in commands:
        command.populate_parser(subparsers)

    subparsers.required = True

    parser.add_argument(
        "-r",
        "--results",
        metavar="results dir",
        default="./results",
        help="directory to store result files",
    )
    parser.add_argument("--verbose", "-v", action="count", default=0)
    parser.add_argument("--version", action="version", version=f"{PROJECT} {VERSION}")

    return parser


def load_config(args) -> config.MMAPeakConfig:
    """Load MMAPeakConfig from the packaged label table.

    If `--labels` has been provided, use that file instead.
    """
    conf = config.MMAPeakConfig()
    if not args.labels_file:
        return conf

    labels_path = os.path.abspath(args.labels_file)
    if not os.path.exists(labels_path):
        logger.error('labels file with name "{}" not found'.format(labels_path))
        sys.exit(1)

    logger.warning("Overriding default operation labels!")
    logger.info('Loading operation labels from "{}"'.format(labels_path))
    try:
        with open(labels_path, encoding="utf-8") as labels_file:
            conf.load(labels_file)
    except OSError as e:
        logger.error('Could not read labels file "{}": {}'.format(labels_path, e))
        sys.exit(1)
    except ValueError as e:
        logger.error('Invalid labels file "{}": {}'.format(labels_path, e))
        sys.exit(1)
    return conf


# ignore sys.argv[0] because that is the name of the program
def main(args=None):
    if args is None:
        args = sys.argv[1:]

    # register reporter plugins before setting up the parser
    ReporterFactory.register("stdout", StdoutReporter)
    ReporterFactory.register("json_file", JSONFileReporter)
    ReporterFactory.register("table", TableReporter)
    ReporterFactory.register("csv_file", CSVFileReporter)

    parser = setup_parser()
    args = parser.parse_args(args)

    logging_config.create_logger(args.verbose)

    conf = load_config(args)
    args.command.run(args, conf)
