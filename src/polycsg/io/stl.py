"""STL export for polycsg solids."""

from __future__ import annotations

import contextlib
import logging
import struct
from typing import Sequence

from polycsg.csg import Triangle

logger = logging.getLogger(__name__)

_HEADER_SIZE = 80
_STRUCT_TRIANGLE = struct.Struct('<12fH')


def write_stl(csg, path_or_file, *, binary: bool = True, name: str = 'polycsg') -> None:
    """Write the boundary of ``csg`` to STL.

    ``path_or_file`` can be a filesystem path or an open binary/text stream.
    Polygons are fan-triangulated from their first vertex.
    """

    triangles = csg.to_triangles()
    logger.debug('write_stl: %d triangles, binary=%s', len(triangles), binary)

    if binary:
        with _opened(path_or_file, 'wb') as stream:
            _write_binary(triangles, stream, name)
    else:
        with _opened(path_or_file, 'w', encoding='ascii') as stream:
            _write_ascii(triangles, stream, name)


@contextlib.contextmanager
def _opened(path_or_file, mode, **kwargs):
    """an open stream is used as is and left open; a path is opened and closed"""
    if hasattr(path_or_file, 'write'):
        yield path_or_file
    else:
        with open(path_or_file, mode, **kwargs) as stream:
            yield stream


def _write_binary(triangles: Sequence[Triangle], stream, name: str) -> None:
    header = name[:_HEADER_SIZE].encode('ascii', errors='replace')
    stream.write(header.ljust(_HEADER_SIZE, b' '))
    stream.write(struct.pack('<I', len(triangles)))
    for tri in triangles:
        stream.write(_STRUCT_TRIANGLE.pack(*tri.normal, *tri.v0, *tri.v1, *tri.v2, 0))


def _fmt(v) -> str:
    return '{:.6e} {:.6e} {:.6e}'.format(v.x, v.y, v.z)


def _write_ascii(triangles: Sequence[Triangle], stream, name: str) -> None:
    lines = ['solid {}'.format(name)]
    for tri in triangles:
        lines.append('  facet normal ' + _fmt(tri.normal))
        lines.append('    outer loop')
        lines.extend('      vertex ' + _fmt(v) for v in (tri.v0, tri.v1, tri.v2))
        lines.append('    endloop')
        lines.append('  endfacet')
    lines.append('endsolid {}'.format(name))
    stream.write('\n'.join(lines) + '\n')


__all__ = ['write_stl']
