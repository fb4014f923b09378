#!/usr/bin/env python3
"""
Voxel Export Demo Script

This script demonstrates the export pipeline by:
1. Creating a synthetic voxel volume (no external data needed)
2. Exporting it to OBJ and PLY
3. Reading the files back and printing statistics

Run with: python examples/demo.py
"""

import sys
from pathlib import Path
import numpy as np
import time

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from voxel_export import Mesh, wavefront_export, ply_export
from voxel_export.exporters import read_obj, read_ply


def create_test_sphere(size: int = 40) -> np.ndarray:
    """
    Create a sphere volume with a height-based color gradient.

    Returns:
        (size, size, size, 4) uint8 RGBA array
    """
    volume = np.zeros((size, size, size, 4), dtype=np.uint8)
    center = (size - 1) / 2
    radius = size / 2 - 2

    x, y, z = np.indices((size, size, size))
    inside = (x - center) ** 2 + (y - center) ** 2 + (z - center) ** 2 < radius ** 2

    volume[inside, 0] = (z[inside] * 255 // size).astype(np.uint8)
    volume[inside, 1] = 120
    volume[inside, 2] = 255 - volume[inside, 0]
    volume[inside, 3] = 255
    return volume


def main():
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    volume = create_test_sphere()
    mesh = Mesh.from_volume(volume)
    print(f"Volume {volume.shape[:3]} -> {len(mesh)} blocks")

    start = time.time()
    obj_stats = wavefront_export(mesh, output_dir / "sphere.obj")
    ply_stats = ply_export(mesh, output_dir / "sphere.ply")
    elapsed = time.time() - start

    print(f"OBJ: {obj_stats.vertices} vertices, {obj_stats.normals} normals, "
          f"{obj_stats.faces} faces from {obj_stats.quads} quads")
    print(f"PLY: {ply_stats.vertices} vertices, {ply_stats.faces} faces")
    print(f"Vertex sharing: {obj_stats.vertices / (4 * obj_stats.quads):.1%} of quad corners")
    print(f"Exported in {elapsed:.2f}s")

    obj = read_obj(output_dir / "sphere.obj")
    ply = read_ply(output_dir / "sphere.ply")
    assert len(obj.face_vertices) == obj_stats.faces
    assert len(ply.faces) == ply_stats.faces
    print("Round trip OK")


if __name__ == "__main__":
    main()
