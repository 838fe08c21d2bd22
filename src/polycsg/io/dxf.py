"""
DXF export for polycsg areas.

``paths_to_dxf`` renders outline paths into a minimal hand-written DXF
document; ``write_dxf`` writes a full R2010 document through ezdxf.
Both emit one ``LWPOLYLINE`` per closed outline.
"""

from __future__ import annotations

import logging
from pathlib import Path

import ezdxf

logger = logging.getLogger(__name__)

_DXF_HEAD = (
    '999\nDXF generated by polycsg\n'
    '  0\nSECTION\n  2\nHEADER\n'
    '  0\nENDSEC\n'
    '  0\nSECTION\n  2\nTABLES\n'
    '  0\nTABLE\n  2\nLTYPE\n  70\n1\n'
    '  0\nLTYPE\n  2\nCONTINUOUS\n  3\nSolid Line\n  72\n65\n  73\n0\n  40\n0.0\n'
    '  0\nENDTAB\n'
    '  0\nTABLE\n  2\nLAYER\n  70\n1\n'
    '  0\nLAYER\n  2\n{layer}\n  62\n7\n  6\ncontinuous\n'
    '  0\nENDTAB\n'
    '  0\nTABLE\n  2\nSTYLE\n  70\n0\n  0\nENDTAB\n'
    '  0\nTABLE\n  2\nVIEW\n  70\n0\n  0\nENDTAB\n'
    '  0\nENDSEC\n'
    '  0\nSECTION\n  2\nBLOCKS\n'
    '  0\nENDSEC\n'
    '  0\nSECTION\n  2\nENTITIES\n'
)
_DXF_TAIL = '  0\nENDSEC\n  0\nEOF\n'


def paths_to_dxf(paths, layer: str = 'PATHS') -> str:
    """DXF document text with one LWPOLYLINE per path

    A closed path repeats its first point at the end and counts it in
    the vertex count.
    """
    result = [_DXF_HEAD.format(layer=layer)]
    for path in paths:
        points = path.points
        if not points:
            continue
        count = len(points) + (1 if path.closed else 0)
        result.append('  0\nLWPOLYLINE\n  8\n{}\n  90\n{}\n  70\n{}\n'.format(
            layer, count, 1 if path.closed else 0))
        for idx in range(count):
            point = points[idx % len(points)]
            result.append(' 10\n{!r}\n 20\n{!r}\n 30\n0.0\n'.format(
                float(point.x), float(point.y)))
    result.append(_DXF_TAIL)
    return ''.join(result)


def write_dxf(geometry, output_path, layer: str = 'PATHS'):
    """Export an area, or a list of outline paths, to a DXF file.

    Args:
        geometry: a ``CAG`` or a sequence of ``Path2D``
        output_path: Path to output DXF file
        layer: DXF layer name (default 'PATHS')

    Returns:
        the ezdxf document that was written.
    """
    if hasattr(geometry, 'get_outline_paths'):
        paths = geometry.get_outline_paths()
    else:
        paths = list(geometry)

    doc = ezdxf.new(dxfversion='R2010', setup=False)
    doc.header['$MEASUREMENT'] = 1  # metric
    doc.header['$INSUNITS'] = 4  # millimeters
    if not doc.layers.has_entry(layer):
        doc.layers.new(layer, dxfattribs={'color': 7})  # white
    msp = doc.modelspace()
    for path in paths:
        if not path.points:
            continue
        msp.add_lwpolyline([(p.x, p.y) for p in path.points],
                           close=path.closed,
                           dxfattribs={'layer': layer})
    doc.saveas(str(Path(output_path)))
    logger.debug('write_dxf: %d paths to %s', len(paths), output_path)
    return doc


__all__ = ['paths_to_dxf', 'write_dxf']
