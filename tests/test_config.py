import contextvars
import dataclasses

import pytest

from polycsg.config import *
from polycsg.plane import Plane
from polycsg.side import Side
from polycsg.vertex import Vertex, Vertex2

## unit tests for polycsg config.py


class TestConfig:

    def test_defaults(self):
        config = Config()
        assert config.epsilon == 1e-5
        assert config.resolution2d == 32
        assert config.resolution3d == 12
        assert not config.debug

    def test_bad_values(self):
        with pytest.raises(ValueError):
            Config(epsilon=0.0)
        with pytest.raises(ValueError):
            Config(resolution2d=0)
        with pytest.raises(ValueError):
            set_config('bad')
        with pytest.raises(ValueError):
            with use_config(None):
                pass

    def test_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            get_config().epsilon = 1.0

    def test_configured_is_scoped(self):
        before = get_config()
        with configured(epsilon=1e-3, resolution2d=8) as config:
            assert get_config() is config
            assert get_config().epsilon == 1e-3
            assert get_config().resolution2d == 8
            assert get_config().resolution3d == before.resolution3d
        assert get_config() is before

    def test_configured_shares_tags(self):
        before = get_config()
        with configured(debug=True) as config:
            assert config.tags is before.tags

    def test_use_config_restores_on_error(self):
        before = get_config()
        with pytest.raises(RuntimeError):
            with use_config(Config(epsilon=1e-2)):
                raise RuntimeError('boom')
        assert get_config() is before

    def test_context_isolation(self):
        before = get_config()
        ctx = contextvars.copy_context()
        ctx.run(set_config, Config(epsilon=1e-3))
        assert get_config() is before
        assert ctx.run(get_config).epsilon == 1e-3

    def test_resolve(self):
        config = Config(epsilon=1e-2)
        assert resolve(config) is config
        assert resolve() is get_config()


class TestTags:

    def test_increasing(self):
        a = Vertex((0, 0, 0))
        b = Vertex((0, 0, 0))
        c = Vertex2((0, 0))
        assert a.tag < b.tag < c.tag

    def test_sides_and_planes_are_tagged(self):
        plane = Plane((0, 0, 1), 0.0)
        side = Side(Vertex2((0, 0)), Vertex2((1, 0)))
        assert side.tag > plane.tag

    def test_explicit_tag(self):
        assert Vertex((1, 2, 3), tag=-7).tag == -7

    def test_private_generator(self):
        config = Config()
        assert Vertex((0, 0, 0), config=config).tag == 1
        assert Vertex((0, 0, 0), config=config).tag == 2

    def test_generator(self):
        tags = TagGenerator(10)
        assert tags.next() == 10
        assert tags.next() == 11
