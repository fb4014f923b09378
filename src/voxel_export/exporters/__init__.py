"""
Writers and readers for the supported text formats.

Supported formats:
- Wavefront (.obj) - quads with shared normal list, no colors
- Stanford PLY (.ply, ASCII) - colored vertices with quad faces
"""

from .obj_exporter import OBJExporter
from .ply_exporter import PLYExporter
from .readers import ObjData, PlyData, read_obj, read_ply

__all__ = ["OBJExporter", "PLYExporter", "ObjData", "PlyData", "read_obj", "read_ply"]
