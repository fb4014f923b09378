"""
Stanford PLY Format Exporter (ASCII)

PLY supports vertex colors natively and is well-supported by Blender and
other 3D software. Faces are written as quads with 0-based vertex indices.
"""

from pathlib import Path
from typing import List, Union
import logging

from ..config import PRODUCT_NAME, PRODUCT_VERSION
from ..errors import ExportError
from ..pool import RecordPool
from ..records import Category

logger = logging.getLogger(__name__)


class PLYExporter:
    """Export a record pool of colored vertices and quad faces to ASCII PLY."""

    def __init__(self, product: str = PRODUCT_NAME, version: str = PRODUCT_VERSION):
        self.product = product
        self.version = version

    def header_lines(self, num_vertices: int, num_faces: int) -> List[str]:
        """Build the PLY header."""
        return [
            "ply",
            "format ascii 1.0",
            f"comment Generated from {self.product} {self.version}",
            f"element vertex {num_vertices}",
            "property float x",
            "property float y",
            "property float z",
            "property uchar red",
            "property uchar green",
            "property uchar blue",
            f"element face {num_faces}",
            "property list uchar int vertex_index",
            "end_header",
        ]

    def render_lines(self, pool: RecordPool) -> List[str]:
        """Build the PLY lines (without line terminators)."""
        lines = self.header_lines(pool.count(Category.VERTEX), pool.count(Category.FACE))

        for vertex in pool.ordered(Category.VERTEX):
            if vertex.color is None:
                raise ExportError("PLY vertices need a color; build the pool with colors")
            x, y, z = vertex.position
            r, g, b = vertex.color
            lines.append(f"{x:g} {y:g} {z:g} {r:d} {g:d} {b:d}")

        # Pool indices are 1-based, PLY indices are 0-based
        for face in pool.ordered(Category.FACE):
            i0, i1, i2, i3 = (v - 1 for v in face.vertices)
            lines.append(f"4 {i0:d} {i1:d} {i2:d} {i3:d}")

        return lines

    def render(self, pool: RecordPool) -> str:
        """Full PLY file content."""
        return "".join(line + "\n" for line in self.render_lines(pool))

    def export(self, pool: RecordPool, output_path: Union[str, Path]):
        """
        Export pool to PLY file.

        Args:
            pool: Pool built with colors (see builder.build_ply_pool)
            output_path: Output file path (.ply)
        """
        output_path = Path(output_path)
        content = self.render(pool)

        with open(output_path, 'w') as f:
            f.write(content)

        logger.info(
            "Wrote %s: %d vertices, %d faces",
            output_path,
            pool.count(Category.VERTEX),
            pool.count(Category.FACE),
        )
