"""I/O utilities for polycsg."""

from .amf import amf_string, write_amf
from .dxf import paths_to_dxf, write_dxf
from .stl import write_stl

__all__ = ['amf_string', 'paths_to_dxf', 'write_amf', 'write_dxf', 'write_stl']
