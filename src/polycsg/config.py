## scoped configuration for polycsg: tolerances, resolutions and
## identity tags

## Copyright (c) 2026 polycsg contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""configuration values for **polycsg**

Every tolerance-driven algorithm in polycsg reads its settings from a
``Config`` value.  The value in effect is held in a context variable,
so a block of code can run with different settings without touching
anybody else's: ::

    with configured(epsilon=1e-6, resolution2d=64):
        shape = CAG.circle(radius=10)

``Config`` is immutable.  The only stateful part is the
``TagGenerator`` it carries, which hands out the identity tags that
vertices, sides and planes receive when they are constructed.
"""

from __future__ import annotations

import contextvars
import itertools
from contextlib import contextmanager
from dataclasses import dataclass, field, replace


class TagGenerator:
    """monotonically increasing source of identity tags, starting at 1"""

    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)

    def __repr__(self):
        return 'TagGenerator()'

    def next(self) -> int:
        return next(self._counter)


@dataclass(frozen=True)
class Config:
    """tolerances and defaults used by the geometry algorithms

    ``epsilon`` governs front/back/coplanar classification, vertex
    merging and degenerate-edge rejection.  ``resolution2d`` and
    ``resolution3d`` are the default number of segments per 360
    degrees for 2D arcs and 3D primitives.  ``debug`` turns on
    convexity assertions when polygons are constructed.
    """

    epsilon: float = 1e-5
    resolution2d: int = 32
    resolution3d: int = 12
    debug: bool = False
    tags: TagGenerator = field(default_factory=TagGenerator, compare=False)

    def __post_init__(self):
        if not self.epsilon > 0.0:
            raise ValueError('bad epsilon passed to Config: {}'.format(self.epsilon))
        if self.resolution2d < 1 or self.resolution3d < 1:
            raise ValueError('bad resolution passed to Config: {}, {}'.format(
                self.resolution2d, self.resolution3d))

    def next_tag(self) -> int:
        return self.tags.next()


_current = contextvars.ContextVar('polycsg_config', default=Config())


def get_config() -> Config:
    """return the configuration in effect for the current context"""
    return _current.get()


def set_config(config: Config) -> None:
    """replace the configuration for the current context"""
    if not isinstance(config, Config):
        raise ValueError('bad thing passed to set_config: {}'.format(config))
    _current.set(config)


@contextmanager
def use_config(config: Config):
    """run a block with ``config`` in effect, restoring the previous one"""
    if not isinstance(config, Config):
        raise ValueError('bad thing passed to use_config: {}'.format(config))
    token = _current.set(config)
    try:
        yield config
    finally:
        _current.reset(token)


@contextmanager
def configured(**changes):
    """run a block with selected settings overridden

    The tag generator is shared with the enclosing configuration, so
    tags stay unique across the boundary.
    """
    with use_config(replace(get_config(), **changes)) as config:
        yield config


def resolve(config=None) -> Config:
    return get_config() if config is None else config


__all__ = [
    'Config',
    'TagGenerator',
    'configured',
    'get_config',
    'resolve',
    'set_config',
    'use_config',
]
