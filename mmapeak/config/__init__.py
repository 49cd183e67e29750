#!/usr/bin/env python3
# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

"""A set of utilitites for consuming and validating config files.

Provides the packaged operation label table and a loader for alternative
label files passed on the command line.

Typical usage example:

    from mmapeak import config

    conf = config.MMAPeakConfig()
    with open("my_labels.yml") as labels_file:
        conf.load(labels_file)


Constants:
    OPERATION_LABELS_PATH: Traversable for the packaged operations.yml.
    OPERATION_LABELS: Read-only mapping operation code -> description.

"""

import importlib.resources
import logging
import types
from typing import IO, Mapping, Union

import yaml

OPERATION_LABELS_PATH = importlib.resources.files("mmapeak.config").joinpath(
    "operations.yml"
)

logger = logging.getLogger(__name__)


def load_operation_labels(
    stream: Union[bytes, IO[bytes], str, IO[str]],
) -> Mapping[str, str]:
    """Parse a YAML label table into a read-only mapping.

    Raises:
        ValueError: the document is not valid YAML or not a mapping of
            strings to strings.
    """
    try:
        labels = yaml.safe_load(stream)
    except yaml.YAMLError as e:
        raise ValueError("operation labels are not valid YAML: {}".format(e)) from e
    if labels is None:
        labels = {}
    if not isinstance(labels, dict):
        raise ValueError(
            "operation labels must be a mapping, got {}".format(type(labels).__name__)
        )
    for operation, label in labels.items():
        if not isinstance(operation, str) or not isinstance(label, str):
            raise ValueError(
                "invalid operation label entry {!r}: {!r}".format(operation, label)
            )
    return types.MappingProxyType(dict(labels))


OPERATION_LABELS: Mapping[str, str] = load_operation_labels(
    OPERATION_LABELS_PATH.read_text(encoding="utf-8")
)


class MMAPeakConfig:
    def __init__(self):
        self.operation_labels = OPERATION_LABELS
        self.operation_labels_path = str(OPERATION_LABELS_PATH)

    def load(self, labels_stream: Union[bytes, IO[bytes], str, IO[str]]):
        self.operation_labels = load_operation_labels(labels_stream)
        self.operation_labels_path = getattr(labels_stream, "name", "<stream>")
        logger.info(
            "Loaded {} operation labels from {}".format(
                len(self.operation_labels), self.operation_labels_path
            )
        )

    def __repr__(self) -> str:
        return f"<MMAPeakConfig labels={self.operation_labels_path}>"
