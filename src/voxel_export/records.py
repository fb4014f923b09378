"""
Geometry records stored in the export pool.

A record is one of three variants: Vertex, Normal or Face. Each variant knows
its Category and can produce a byte key used for deduplication. Keys are
built from the exact bit pattern of every field, so two records are the same
only if all their fields are bit-identical (0.0 and -0.0 differ, no
floating-point tolerance).
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, Optional, Tuple
import struct


class Category(IntEnum):
    """Record categories, valued in file emission order."""
    VERTEX = 0
    NORMAL = 1
    FACE = 2


Vec3 = Tuple[float, float, float]
RGB = Tuple[int, int, int]
Quad = Tuple[int, int, int, int]


@dataclass(frozen=True)
class Vertex:
    """A vertex position, optionally with an RGB color."""
    position: Vec3
    color: Optional[RGB] = None

    category: ClassVar[Category] = Category.VERTEX

    @property
    def key(self) -> bytes:
        key = struct.pack("<3d", *self.position)
        if self.color is not None:
            key += struct.pack("<3B", *self.color)
        return key


@dataclass(frozen=True)
class Normal:
    """A normal direction."""
    direction: Vec3

    category: ClassVar[Category] = Category.NORMAL

    @property
    def key(self) -> bytes:
        return struct.pack("<3d", *self.direction)


@dataclass(frozen=True)
class Face:
    """
    A quad face.

    Indices are 1-based references into the pool's vertex and normal
    categories. `normals` is None for formats that do not reference normals.
    """
    vertices: Quad
    normals: Optional[Quad] = None

    category: ClassVar[Category] = Category.FACE

    @property
    def key(self) -> bytes:
        key = struct.pack("<4i", *self.vertices)
        if self.normals is not None:
            key += struct.pack("<4i", *self.normals)
        return key
