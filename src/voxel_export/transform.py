"""
Block-local to world coordinate transform.

Quad corners come out of the generator in block-local space, with the origin
at a block corner. A block's world placement is a translation by its integer
position followed by a fixed centering translation of -(N/2) + 0.5 on each
axis, N being the block edge length.

Blocks are axis-aligned, so the rotation part of the matrix is the identity
and normals pass through unchanged. Normals are never translated.
"""

from typing import Sequence
import numpy as np

from .config import BLOCK_SIZE, centering_offset


def translation_matrix(tx: float, ty: float, tz: float) -> np.ndarray:
    """4x4 homogeneous translation matrix."""
    matrix = np.eye(4, dtype=np.float64)
    matrix[:3, 3] = [tx, ty, tz]
    return matrix


def block_matrix(pos: Sequence[int], block_size: int = BLOCK_SIZE) -> np.ndarray:
    """
    Build the local-to-world matrix of a block.

    Args:
        pos: Integer block position (x, y, z) in voxel-grid coordinates
        block_size: Block edge length

    Returns:
        (4, 4) float64 matrix: translate(pos) then translate(centering)
    """
    offset = centering_offset(block_size)
    matrix = np.eye(4, dtype=np.float64)
    matrix = matrix @ translation_matrix(pos[0], pos[1], pos[2])
    matrix = matrix @ translation_matrix(offset, offset, offset)
    return matrix


def apply_matrix(matrix: np.ndarray, points: np.ndarray) -> np.ndarray:
    """Apply a 4x4 matrix to an (N, 3) array of points."""
    points = np.asarray(points, dtype=np.float64)
    homogeneous = np.hstack([points, np.ones((len(points), 1))])
    return (matrix @ homogeneous.T).T[:, :3]


def to_world(
    pos: Sequence[int],
    positions: np.ndarray,
    block_size: int = BLOCK_SIZE
) -> np.ndarray:
    """
    Transform block-local corner positions to world space.

    Args:
        pos: Integer block position
        positions: (N, 3) local corner positions
        block_size: Block edge length

    Returns:
        (N, 3) float64 world positions
    """
    return apply_matrix(block_matrix(pos, block_size), positions)


def rotate_normals(
    pos: Sequence[int],
    normals: np.ndarray,
    block_size: int = BLOCK_SIZE
) -> np.ndarray:
    """Apply only the rotation part of the block matrix to (N, 3) normals."""
    rotation = block_matrix(pos, block_size)[:3, :3]
    normals = np.asarray(normals, dtype=np.float64)
    # Identity rotation keeps the exact bits (a product would turn -0.0 into 0.0)
    if np.array_equal(rotation, np.eye(3)):
        return normals.copy()
    return (rotation @ normals.T).T
