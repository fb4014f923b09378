"""
Constants shared by the export pipeline.

The block edge length and the centering offset must match the coordinate
frame of the quad generator: corners come out in block-local space with the
origin at a block corner, and the centering offset moves them so that block
positions refer to the block centre.
"""

# Edge length of a block, in voxels
BLOCK_SIZE = 16

# Quads are emitted with 4 corners, at most one quad per voxel face
CORNERS_PER_QUAD = 4
FACES_PER_VOXEL = 6

# Face mask bits, one per direction (same order as FaceDirection)
FACE_WEST = 1 << 0
FACE_EAST = 1 << 1
FACE_SOUTH = 1 << 2
FACE_NORTH = 1 << 3
FACE_BOTTOM = 1 << 4
FACE_TOP = 1 << 5
ALL_FACES = 0x3F

PRODUCT_NAME = "Voxel Export"
PRODUCT_VERSION = "1.0.0"


def centering_offset(block_size: int = BLOCK_SIZE) -> float:
    """
    Per-axis translation applied after the block offset.

    Uses the integer half size so that odd sizes agree with block positions
    placed at chunk origin + block_size // 2.
    """
    return -(block_size // 2) + 0.5


CENTERING_OFFSET = centering_offset(BLOCK_SIZE)


def max_quads(block_size: int = BLOCK_SIZE) -> int:
    """Worst case quad count for one block (every face of every voxel)."""
    return block_size ** 3 * FACES_PER_VOXEL
