# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.
import logging
import logging.handlers
import os


class ConditionalFormatter(logging.Formatter):
    def format(self, record):
        if hasattr(record, "raw") and record.raw:
            return record.getMessage()
        else:
            return logging.Formatter.format(self, record)


formatter = ConditionalFormatter(
    "[%(asctime)s] %(name)-12s %(levelname)-8s: %(message)s"
)

stream_handler = logging.StreamHandler()
stream_handler.setLevel(logging.WARNING)

_file_handler = None


def create_logger(verbosity=0):
    """Configure the root logger. Safe to call more than once per process."""
    global _file_handler

    root = logging.getLogger()
    root.setLevel(os.environ.get("LOGLEVEL", "INFO"))
    if _file_handler is None:
        _file_handler = logging.handlers.WatchedFileHandler(
            os.environ.get("MMAPEAK_LOG_FILE", "mmapeak.log")
        )
        _file_handler.setFormatter(formatter)
        root.addHandler(_file_handler)
    if stream_handler not in root.handlers:
        root.addHandler(stream_handler)

    if verbosity >= 2:
        stream_handler.setLevel(logging.DEBUG)
        root.setLevel(logging.DEBUG)
    elif verbosity == 1:
        stream_handler.setLevel(logging.INFO)
    else:
        stream_handler.setLevel(logging.WARNING)
    return root
