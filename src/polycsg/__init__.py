# -*- coding: utf-8 -*-
from importlib.metadata import PackageNotFoundError, version


try:
    __version__ = version("polycsg")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"

from polycsg.basis import OrthoNormalBasis
from polycsg.cag import CAG
from polycsg.config import Config, configured, get_config, set_config, use_config
from polycsg.csg import CSG
from polycsg.path2d import Path2D
from polycsg.plane import Plane
from polycsg.polygon import Polygon, SharedProperties
from polycsg.side import Side
from polycsg.vector import Vector2, Vector3
from polycsg.vertex import Vertex, Vertex2

__all__ = [
    'CAG',
    'CSG',
    'Config',
    'OrthoNormalBasis',
    'Path2D',
    'Plane',
    'Polygon',
    'SharedProperties',
    'Side',
    'Vector2',
    'Vector3',
    'Vertex',
    'Vertex2',
    'configured',
    'get_config',
    'set_config',
    'use_config',
]
