"""AMF (additive manufacturing format) export for polycsg solids."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

_AMF_HEAD = ('<?xml version="1.0" encoding="UTF-8"?>\n'
             '<amf unit="millimeter">\n'
             '<metadata type="producer">polycsg</metadata>\n'
             '<object id="0">\n'
             '<mesh>\n')
_AMF_TAIL = '</mesh>\n</object>\n</amf>\n'


def _color_string(color):
    r, g, b, a = color
    return '<color><r>{!r}</r><g>{!r}</g><b>{!r}</b><a>{!r}</a></color>'.format(r, g, b, a)


def amf_string(csg) -> str:
    """AMF document for ``csg``

    Every polygon vertex is listed once, in polygon order.  Polygons
    are fan-triangulated and grouped into one ``<volume>`` per
    ``shared`` handle, carrying that surface's color.
    """
    result = [_AMF_HEAD, '<vertices>\n']
    volumes = {}
    order = []
    index = 0
    for polygon in csg.polygons:
        first = index
        for vertex in polygon.vertices:
            result.append(vertex.to_amf_string())
            result.append('\n')
        key = id(polygon.shared)
        if key not in volumes:
            volumes[key] = (polygon.shared, [])
            order.append(key)
        triangles = volumes[key][1]
        for i in range(1, len(polygon.vertices) - 1):
            triangles.append((first, first + i, first + i + 1))
        index += len(polygon.vertices)
    result.append('</vertices>\n')

    for key in order:
        shared, triangles = volumes[key]
        result.append('<volume>\n')
        result.append(_color_string(shared.color))
        result.append('\n')
        for v1, v2, v3 in triangles:
            result.append('<triangle><v1>{}</v1><v2>{}</v2><v3>{}</v3></triangle>\n'.format(
                v1, v2, v3))
        result.append('</volume>\n')

    result.append(_AMF_TAIL)
    logger.debug('amf_string: %d vertices, %d volumes', index, len(order))
    return ''.join(result)


def write_amf(csg, path) -> None:
    with open(path, 'w', encoding='utf-8') as stream:
        stream.write(amf_string(csg))


__all__ = ['amf_string', 'write_amf']
