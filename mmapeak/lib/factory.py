#!/usr/bin/env python3
# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import logging

logger = logging.getLogger(__name__)


class BaseFactory(object):
    """Registry of named implementations of one base class."""

    def __init__(self, base_class):
        self.base_class = base_class
        self.classes = {}

    def register(self, name, subclass):
        if not issubclass(subclass, self.base_class):
            raise TypeError(
                "{} is not a subclass of {}".format(
                    subclass.__name__, self.base_class.__name__
                )
            )
        if name in self.classes:
            logger.debug('Replacing "%s" registered for %s', name, self.base_class)
        self.classes[name] = subclass

    def create(self, name, *args, **kwargs):
        if name not in self.classes:
            raise KeyError(
                'No {} registered as "{}"'.format(self.base_class.__name__, name)
            )
        return self.classes[name](*args, **kwargs)

    @property
    def registered_names(self):
        return sorted(self.classes.keys())
