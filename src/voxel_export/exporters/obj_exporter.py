"""
Wavefront OBJ Format Exporter

Writes a RecordPool as a quad-face OBJ file:

    # <product> <version>
    v x y z          (one per Vertex record)
    vn x y z         (one per Normal record)
    f v//n v//n v//n v//n

Limitations:
- No colors (OBJ has no native vertex color support)
- Faces are the generator's quads, not merged or triangulated
"""

from pathlib import Path
from typing import List, Union
import logging

from ..config import PRODUCT_NAME, PRODUCT_VERSION
from ..errors import ExportError
from ..pool import RecordPool
from ..records import Category

logger = logging.getLogger(__name__)


class OBJExporter:
    """Export a record pool to Wavefront OBJ."""

    def __init__(self, product: str = PRODUCT_NAME, version: str = PRODUCT_VERSION):
        """
        Initialize the exporter.

        Args:
            product: Product name written in the header comment
            version: Product version written in the header comment
        """
        self.product = product
        self.version = version

    def render_lines(self, pool: RecordPool) -> List[str]:
        """Build the OBJ lines (without line terminators)."""
        lines = [f"# {self.product} {self.version}"]

        for vertex in pool.ordered(Category.VERTEX):
            x, y, z = vertex.position
            lines.append(f"v {x:g} {y:g} {z:g}")

        for normal in pool.ordered(Category.NORMAL):
            x, y, z = normal.direction
            lines.append(f"vn {x:g} {y:g} {z:g}")

        for face in pool.ordered(Category.FACE):
            if face.normals is None:
                raise ExportError("OBJ faces need normal indices; build the pool with normals")
            refs = " ".join(f"{v}//{n}" for v, n in zip(face.vertices, face.normals))
            lines.append(f"f {refs}")

        return lines

    def render(self, pool: RecordPool) -> str:
        """Full OBJ file content."""
        return "".join(line + "\n" for line in self.render_lines(pool))

    def export(self, pool: RecordPool, output_path: Union[str, Path]):
        """
        Export pool to OBJ file.

        Args:
            pool: Pool built with normals (see builder.build_obj_pool)
            output_path: Output file path (.obj)
        """
        output_path = Path(output_path)
        content = self.render(pool)

        with open(output_path, 'w') as f:
            f.write(content)

        logger.info(
            "Wrote %s: %d vertices, %d normals, %d faces",
            output_path,
            pool.count(Category.VERTEX),
            pool.count(Category.NORMAL),
            pool.count(Category.FACE),
        )
