"""
Top-level export entry points.

Example Usage:
    mesh = Mesh.from_volume(volume)
    stats = wavefront_export(mesh, "model.obj")
    ply_export(mesh, "model.ply")
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Union

from .blocks import Mesh
from .builder import MeshBuilder
from .config import PRODUCT_NAME, PRODUCT_VERSION
from .exporters import OBJExporter, PLYExporter
from .pool import RecordPool
from .records import Category


@dataclass
class ExportStats:
    """Counts for one export call."""
    vertices: int
    normals: int
    faces: int
    blocks: int
    quads: int

    @classmethod
    def from_build(cls, pool: RecordPool, builder: MeshBuilder) -> "ExportStats":
        return cls(
            vertices=pool.count(Category.VERTEX),
            normals=pool.count(Category.NORMAL),
            faces=pool.count(Category.FACE),
            blocks=builder.block_count,
            quads=builder.quad_count,
        )


def wavefront_export(
    mesh: Mesh,
    path: Union[str, Path],
    product: str = PRODUCT_NAME,
    version: str = PRODUCT_VERSION,
    **builder_options
) -> ExportStats:
    """
    Export a mesh as a Wavefront OBJ file (quads, normals, no colors).

    Args:
        mesh: Blocks to export
        path: Destination .obj path
        product, version: Written in the header comment
        **builder_options: Passed to MeshBuilder (quad_generator, face_mask)

    Returns:
        ExportStats
    """
    builder = MeshBuilder(with_colors=False, with_normals=True, **builder_options)
    pool = builder.build(mesh)
    OBJExporter(product, version).export(pool, path)
    return ExportStats.from_build(pool, builder)


def ply_export(
    mesh: Mesh,
    path: Union[str, Path],
    product: str = PRODUCT_NAME,
    version: str = PRODUCT_VERSION,
    **builder_options
) -> ExportStats:
    """
    Export a mesh as an ASCII PLY file (colored vertices, quad faces).

    Args:
        mesh: Blocks to export
        path: Destination .ply path
        product, version: Written in the header comment
        **builder_options: Passed to MeshBuilder (quad_generator, face_mask)

    Returns:
        ExportStats
    """
    builder = MeshBuilder(with_colors=True, with_normals=False, **builder_options)
    pool = builder.build(mesh)
    PLYExporter(product, version).export(pool, path)
    return ExportStats.from_build(pool, builder)
