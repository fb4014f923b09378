"""
Export orchestration: blocks -> quads -> deduplicated record pool.

For every block the quad generator fills a shared scratch buffer, the corners
are moved to world space, and each quad is turned into four Vertex records,
optionally four Normal records, and one Face record referencing their pool
indices. All blocks feed one pool, which the format writers then consume.
"""

from typing import Callable
import logging
import numpy as np

from .blocks import Mesh, QuadBuffer, generate_quads
from .config import ALL_FACES, BLOCK_SIZE, CORNERS_PER_QUAD
from .errors import MalformedInputError
from .pool import RecordPool
from .records import Face, Normal, Vertex
from .transform import rotate_normals, to_world

logger = logging.getLogger(__name__)

QuadGenerator = Callable[[np.ndarray, int, QuadBuffer], int]


class MeshBuilder:
    """
    Build a RecordPool from a Mesh.

    Two configurations are used by the writers:
    - OBJ: positions only, normals referenced by faces
    - PLY: positions with RGB colors, faces reference vertices only
    """

    def __init__(
        self,
        with_colors: bool = False,
        with_normals: bool = True,
        quad_generator: QuadGenerator = generate_quads,
        face_mask: int = ALL_FACES
    ):
        """
        Initialize the builder.

        Args:
            with_colors: Store the corner RGB color in Vertex records
            with_normals: Store Normal records and reference them from faces
            quad_generator: Callable (block_data, face_mask, buffer) -> quad count
            face_mask: Face directions passed to the generator
        """
        self.with_colors = with_colors
        self.with_normals = with_normals
        self.quad_generator = quad_generator
        self.face_mask = face_mask
        self.block_count = 0
        self.quad_count = 0

    def build(self, mesh: Mesh) -> RecordPool:
        """
        Process every block of `mesh` into a new pool.

        Args:
            mesh: Mesh, or any iterable of blocks of size config.BLOCK_SIZE

        Returns:
            Populated RecordPool

        Raises:
            MalformedInputError: A block does not match the mesh block size, or
                the generator reported an impossible quad count
        """
        pool = RecordPool()
        block_size = getattr(mesh, "block_size", BLOCK_SIZE)
        buffer = QuadBuffer(block_size)
        self.block_count = 0
        self.quad_count = 0

        for block in mesh:
            if block.size != block_size:
                raise MalformedInputError(
                    f"Block at {block.pos} has size {block.size}, mesh block size is {block_size}"
                )
            nb_quads = self.quad_generator(block.data, self.face_mask, buffer)
            if nb_quads < 0 or nb_quads > buffer.capacity:
                raise MalformedInputError(
                    f"Quad generator reported {nb_quads} quads for block at {block.pos}, "
                    f"buffer holds {buffer.capacity}"
                )
            self._add_block(pool, block.pos, buffer, nb_quads, block_size)
            self.block_count += 1
            self.quad_count += nb_quads
            logger.debug("Block %s: %d quads", block.pos, nb_quads)

        logger.info("Built %r from %d blocks, %d quads", pool, self.block_count, self.quad_count)
        return pool

    def _add_block(
        self,
        pool: RecordPool,
        pos,
        buffer: QuadBuffer,
        nb_quads: int,
        block_size: int
    ):
        """Insert the records of one block's quads."""
        if nb_quads == 0:
            return

        positions, normals, colors = buffer.corners(nb_quads)
        world = to_world(pos, positions, block_size).tolist()
        directions = rotate_normals(pos, normals, block_size).tolist() if self.with_normals else None
        rgb = colors[:, :3].tolist() if self.with_colors else None

        for q in range(nb_quads):
            base = q * CORNERS_PER_QUAD
            corners = range(base, base + CORNERS_PER_QUAD)

            # Put the vertices
            vs = []
            for j in corners:
                color = tuple(rgb[j]) if rgb is not None else None
                vs.append(pool.find_or_insert(Vertex(tuple(world[j]), color)))

            # Put the normals
            vns = None
            if directions is not None:
                vns = tuple(pool.find_or_insert(Normal(tuple(directions[j]))) for j in corners)

            pool.find_or_insert(Face(tuple(vs), vns))


def build_obj_pool(mesh: Mesh, **kwargs) -> RecordPool:
    """Pool for OBJ output: positions, normals, faces with normal references."""
    return MeshBuilder(with_colors=False, with_normals=True, **kwargs).build(mesh)


def build_ply_pool(mesh: Mesh, **kwargs) -> RecordPool:
    """Pool for PLY output: colored positions, faces with vertex references only."""
    return MeshBuilder(with_colors=True, with_normals=False, **kwargs).build(mesh)
