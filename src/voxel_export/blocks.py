"""
Voxel blocks and per-block quad generation.

This module provides:
- Block: a fixed-size cube of RGBA voxels at an integer position
- Mesh: a read-only sequence of blocks
- QuadBuffer: scratch arrays receiving the corners of one block's quads
- generate_quads: default quad generator, one quad per exposed voxel face

The generator is a plain function so the export pipeline can be driven by
any other mesher with the same signature:

    quad_count = generator(block_data, face_mask, buffer)

Corner positions are block-local, origin at the block corner.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Tuple
import logging
import numpy as np
from numba import njit

from .config import BLOCK_SIZE, CORNERS_PER_QUAD, max_quads
from .errors import MalformedInputError

logger = logging.getLogger(__name__)


# Normal vectors for each face direction (WEST, EAST, SOUTH, NORTH, BOTTOM, TOP)
FACE_NORMALS = np.array([
    [-1, 0, 0],
    [1, 0, 0],
    [0, -1, 0],
    [0, 1, 0],
    [0, 0, -1],
    [0, 0, 1],
], dtype=np.float32)

# Unit corner offsets for each face direction, in winding order
FACE_CORNERS = np.array([
    [[0, 0, 0], [0, 1, 0], [0, 1, 1], [0, 0, 1]],  # WEST (-X)
    [[1, 0, 0], [1, 0, 1], [1, 1, 1], [1, 1, 0]],  # EAST (+X)
    [[0, 0, 0], [0, 0, 1], [1, 0, 1], [1, 0, 0]],  # SOUTH (-Y)
    [[0, 1, 0], [1, 1, 0], [1, 1, 1], [0, 1, 1]],  # NORTH (+Y)
    [[0, 0, 0], [1, 0, 0], [1, 1, 0], [0, 1, 0]],  # BOTTOM (-Z)
    [[0, 0, 1], [0, 1, 1], [1, 1, 1], [1, 0, 1]],  # TOP (+Z)
], dtype=np.float32)

# Neighbor step for each face direction
FACE_STEPS = np.array([
    [-1, 0, 0],
    [1, 0, 0],
    [0, -1, 0],
    [0, 1, 0],
    [0, 0, -1],
    [0, 0, 1],
], dtype=np.int64)


@dataclass(eq=False)
class Block:
    """
    Fixed-size cube of voxel data.

    Attributes:
        pos: Integer position (x, y, z) of the block centre
        data: (N, N, N, 4) uint8 RGBA array, alpha > 0 means solid
    """
    pos: Tuple[int, int, int]
    data: np.ndarray

    def __post_init__(self):
        self.pos = tuple(int(c) for c in self.pos)
        if len(self.pos) != 3:
            raise MalformedInputError(f"Block position must have 3 components, got {self.pos}")
        data = self.data
        if (not isinstance(data, np.ndarray) or data.ndim != 4 or data.shape[3] != 4
                or not (data.shape[0] == data.shape[1] == data.shape[2])):
            shape = getattr(data, "shape", None)
            raise MalformedInputError(f"Block data must have shape (N, N, N, 4), got {shape}")
        if data.dtype != np.uint8:
            raise MalformedInputError(f"Block data must be uint8, got {data.dtype}")

    @property
    def size(self) -> int:
        """Block edge length."""
        return self.data.shape[0]

    def count_voxels(self) -> int:
        """Number of solid voxels."""
        return int(np.count_nonzero(self.data[:, :, :, 3]))


@dataclass
class Mesh:
    """
    Read-only collection of blocks.

    The export pipeline iterates the blocks and never modifies them.
    """
    blocks: List[Block] = field(default_factory=list)
    block_size: int = BLOCK_SIZE

    def __iter__(self) -> Iterator[Block]:
        return iter(self.blocks)

    def __len__(self) -> int:
        return len(self.blocks)

    @classmethod
    def from_volume(cls, volume: np.ndarray, block_size: int = BLOCK_SIZE) -> "Mesh":
        """
        Split a dense voxel volume into blocks.

        Args:
            volume: (X, Y, Z, 4) uint8 RGBA array
            block_size: Block edge length

        Returns:
            Mesh whose blocks cover every solid voxel; empty blocks are skipped.
            Each block position is its chunk origin plus block_size // 2.
        """
        volume = np.asarray(volume)
        if volume.ndim != 4 or volume.shape[3] != 4:
            raise MalformedInputError(f"Volume must have shape (X, Y, Z, 4), got {volume.shape}")
        if volume.dtype != np.uint8:
            raise MalformedInputError(f"Volume must be uint8, got {volume.dtype}")

        n = block_size
        sx, sy, sz = volume.shape[:3]
        blocks = []

        for bx in range(0, sx, n):
            for by in range(0, sy, n):
                for bz in range(0, sz, n):
                    chunk = volume[bx:bx + n, by:by + n, bz:bz + n]
                    if not np.any(chunk[:, :, :, 3]):
                        continue
                    data = np.zeros((n, n, n, 4), dtype=np.uint8)
                    data[:chunk.shape[0], :chunk.shape[1], :chunk.shape[2]] = chunk
                    pos = (bx + n // 2, by + n // 2, bz + n // 2)
                    blocks.append(Block(pos, data))

        logger.debug("Split volume %s into %d blocks of size %d", volume.shape[:3], len(blocks), n)
        return cls(blocks=blocks, block_size=block_size)


class QuadBuffer:
    """
    Scratch storage for the quads of one block.

    Sized for the worst case (every face of every voxel) and reused across
    blocks. Corner i of quad q lives at row q * 4 + i.
    """

    def __init__(self, block_size: int = BLOCK_SIZE):
        self.block_size = block_size
        self.capacity = max_quads(block_size)
        corners = self.capacity * CORNERS_PER_QUAD
        self.positions = np.zeros((corners, 3), dtype=np.float32)
        self.normals = np.zeros((corners, 3), dtype=np.float32)
        self.colors = np.zeros((corners, 4), dtype=np.uint8)

    def corners(self, quad_count: int) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Views on the first quad_count quads (positions, normals, colors)."""
        n = quad_count * CORNERS_PER_QUAD
        return self.positions[:n], self.normals[:n], self.colors[:n]


@njit(cache=True)
def _is_solid(data: np.ndarray, x: int, y: int, z: int) -> bool:
    """Check if a voxel is solid; out-of-block counts as empty."""
    n = data.shape[0]
    if x < 0 or x >= n or y < 0 or y >= n or z < 0 or z >= n:
        return False
    return data[x, y, z, 3] > 0


@njit(cache=True)
def _generate_quads_kernel(
    data: np.ndarray,
    face_mask: int,
    face_normals: np.ndarray,
    face_corners: np.ndarray,
    face_steps: np.ndarray,
    positions: np.ndarray,
    normals: np.ndarray,
    colors: np.ndarray
) -> int:
    """
    Emit one quad per solid voxel face that borders an empty voxel.

    Returns:
        Number of quads written
    """
    n = data.shape[0]
    quad_count = 0

    for x in range(n):
        for y in range(n):
            for z in range(n):
                if data[x, y, z, 3] == 0:
                    continue

                for direction in range(6):
                    if ((face_mask >> direction) & 1) == 0:
                        continue
                    if _is_solid(data,
                                 x + face_steps[direction, 0],
                                 y + face_steps[direction, 1],
                                 z + face_steps[direction, 2]):
                        continue

                    base = quad_count * 4
                    for corner in range(4):
                        row = base + corner
                        positions[row, 0] = x + face_corners[direction, corner, 0]
                        positions[row, 1] = y + face_corners[direction, corner, 1]
                        positions[row, 2] = z + face_corners[direction, corner, 2]
                        normals[row, 0] = face_normals[direction, 0]
                        normals[row, 1] = face_normals[direction, 1]
                        normals[row, 2] = face_normals[direction, 2]
                        for c in range(4):
                            colors[row, c] = data[x, y, z, c]
                    quad_count += 1

    return quad_count


def generate_quads(data: np.ndarray, face_mask: int, buffer: QuadBuffer) -> int:
    """
    Fill `buffer` with the visible quads of one block.

    Args:
        data: (N, N, N, 4) uint8 block data
        face_mask: Bitmask of face directions to generate (see config.ALL_FACES)
        buffer: Scratch buffer sized for at least N**3 * 6 quads

    Returns:
        Number of quads written to the buffer
    """
    if (data.ndim != 4 or data.shape[3] != 4
            or not (data.shape[0] == data.shape[1] == data.shape[2])):
        raise MalformedInputError(f"Block data must have shape (N, N, N, 4), got {data.shape}")
    if max_quads(data.shape[0]) > buffer.capacity:
        raise MalformedInputError(
            f"Block of size {data.shape[0]} does not fit a buffer of {buffer.capacity} quads"
        )

    return int(_generate_quads_kernel(
        data, int(face_mask),
        FACE_NORMALS, FACE_CORNERS, FACE_STEPS,
        buffer.positions, buffer.normals, buffer.colors
    ))
