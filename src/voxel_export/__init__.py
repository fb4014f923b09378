"""
Voxel Export
============

Export block-based voxel volumes to Wavefront OBJ and ASCII PLY.

Every block is turned into quads (one per exposed voxel face), the quad
corners are moved to world space and collected in a deduplicating record
pool, and the pool is written out by one of the format writers. Vertices and
normals shared between quads are written once.

Example Usage:
    from voxel_export import Mesh, wavefront_export, ply_export

    mesh = Mesh.from_volume(volume)   # (X, Y, Z, 4) uint8 RGBA
    wavefront_export(mesh, "model.obj")
    ply_export(mesh, "model.ply")
"""

__version__ = "1.0.0"
__author__ = "Voxel Export Team"

from .blocks import Block, Mesh, QuadBuffer, generate_quads
from .builder import MeshBuilder, build_obj_pool, build_ply_pool
from .errors import ExportError, MalformedInputError
from .exporter import ExportStats, wavefront_export, ply_export
from .pool import RecordPool
from .records import Category, Vertex, Normal, Face

__all__ = [
    "Block",
    "Mesh",
    "QuadBuffer",
    "generate_quads",
    "MeshBuilder",
    "build_obj_pool",
    "build_ply_pool",
    "ExportError",
    "MalformedInputError",
    "ExportStats",
    "wavefront_export",
    "ply_export",
    "RecordPool",
    "Category",
    "Vertex",
    "Normal",
    "Face",
]
