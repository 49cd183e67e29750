#!/usr/bin/env python3
# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import logging
import sys
from abc import ABCMeta, abstractmethod

from mmapeak.lib import util
from mmapeak.lib.parser_factory import ParserFactory


logger = logging.getLogger(__name__)


class MMAPeakCommand(object, metaclass=ABCMeta):
    @abstractmethod
    def populate_parser(self, parser):
        pass

    @abstractmethod
    def run(self, args, config):
        pass


def load_result(source, config):
    """Read and parse one log, exiting with status 1 if it cannot be read."""
    try:
        text = util.read_log(source)
    except OSError as e:
        logger.error('Could not read log "%s": %s', source, e)
        sys.exit(1)
    parser = ParserFactory.create("mmapeak", config.operation_labels)
    return parser.parse_result(text.split("\n"))
