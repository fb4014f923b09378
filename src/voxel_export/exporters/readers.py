"""
Readers for the OBJ and PLY subsets written by this package.

Used to check exported files (counts, connectivity) and by the `--info`
command line mode. Only quad faces are accepted.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Union
import numpy as np

from ..errors import MalformedInputError


@dataclass
class ObjData:
    """Parsed OBJ content."""
    vertices: np.ndarray       # (N, 3) float64 positions
    normals: np.ndarray        # (M, 3) float64 normals
    face_vertices: np.ndarray  # (F, 4) int64, 1-based
    face_normals: np.ndarray   # (F, 4) int64, 1-based
    comments: List[str] = field(default_factory=list)
    # Statement kinds in file order, one entry per run ("v", "vn", "f")
    sections: List[str] = field(default_factory=list)


@dataclass
class PlyData:
    """Parsed PLY content."""
    vertices: np.ndarray  # (N, 3) float64 positions
    colors: np.ndarray    # (N, 3) uint8 RGB
    faces: np.ndarray     # (F, 4) int64, 0-based
    comments: List[str] = field(default_factory=list)


def _floats(parts: List[str], lineno: int) -> List[float]:
    if len(parts) != 3:
        raise MalformedInputError(f"Line {lineno}: expected 3 values, got {len(parts)}")
    try:
        return [float(p) for p in parts]
    except ValueError as e:
        raise MalformedInputError(f"Line {lineno}: {e}") from e


def read_obj(path: Union[str, Path]) -> ObjData:
    """
    Parse an OBJ file with `v`, `vn` and `f v//n` quad lines.

    Args:
        path: OBJ file path

    Returns:
        ObjData
    """
    vertices, normals, face_vs, face_ns, comments, kinds = [], [], [], [], [], []

    with open(path, 'r') as f:
        for lineno, raw in enumerate(f, start=1):
            line = raw.strip()
            if not line:
                continue
            if line.startswith("#"):
                comments.append(line[1:].strip())
                continue

            tag, *parts = line.split()
            if tag == "v":
                vertices.append(_floats(parts, lineno))
            elif tag == "vn":
                normals.append(_floats(parts, lineno))
            elif tag == "f":
                if len(parts) != 4:
                    raise MalformedInputError(f"Line {lineno}: expected a quad face")
                vs, ns = [], []
                for ref in parts:
                    v, sep, n = ref.partition("//")
                    if not sep:
                        raise MalformedInputError(f"Line {lineno}: expected v//vn, got {ref!r}")
                    try:
                        vs.append(int(v))
                        ns.append(int(n))
                    except ValueError as e:
                        raise MalformedInputError(f"Line {lineno}: {e}") from e
                face_vs.append(vs)
                face_ns.append(ns)
            else:
                raise MalformedInputError(f"Line {lineno}: unsupported OBJ statement {tag!r}")

            if not kinds or kinds[-1] != tag:
                kinds.append(tag)

    return ObjData(
        vertices=np.array(vertices, dtype=np.float64).reshape(-1, 3),
        normals=np.array(normals, dtype=np.float64).reshape(-1, 3),
        face_vertices=np.array(face_vs, dtype=np.int64).reshape(-1, 4),
        face_normals=np.array(face_ns, dtype=np.int64).reshape(-1, 4),
        comments=comments,
        sections=kinds,
    )


def read_ply(path: Union[str, Path]) -> PlyData:
    """
    Parse an ASCII PLY file with colored vertices and quad faces.

    Args:
        path: PLY file path

    Returns:
        PlyData
    """
    with open(path, 'r') as f:
        lines = [line.strip() for line in f]

    if not lines or lines[0] != "ply":
        raise MalformedInputError("Missing 'ply' magic line")

    counts = {}
    comments = []
    body_start = None
    for i, line in enumerate(lines[1:], start=1):
        if line == "end_header":
            body_start = i + 1
            break
        parts = line.split()
        if not parts:
            continue
        if parts[0] == "format" and parts[1:2] != ["ascii"]:
            raise MalformedInputError(f"Only ASCII PLY is supported, got {line!r}")
        if parts[0] == "comment":
            comments.append(line[len("comment"):].strip())
        elif parts[0] == "element":
            if len(parts) != 3:
                raise MalformedInputError(f"Bad element line {line!r}")
            try:
                counts[parts[1]] = int(parts[2])
            except ValueError as e:
                raise MalformedInputError(f"Bad element count in {line!r}") from e

    if body_start is None:
        raise MalformedInputError("Missing 'end_header'")

    num_vertices = counts.get("vertex", 0)
    num_faces = counts.get("face", 0)
    body = [line for line in lines[body_start:] if line]
    if len(body) != num_vertices + num_faces:
        raise MalformedInputError(
            f"Expected {num_vertices + num_faces} data lines, got {len(body)}"
        )

    try:
        vertex_rows = [line.split() for line in body[:num_vertices]]
        if any(len(row) != 6 for row in vertex_rows):
            raise MalformedInputError("Vertex lines must have 6 values")
        vertices = np.array(
            [[float(v) for v in row[:3]] for row in vertex_rows], dtype=np.float64
        ).reshape(-1, 3)
        colors = np.array(
            [[int(c) for c in row[3:]] for row in vertex_rows], dtype=np.int64
        ).reshape(-1, 3)
        face_rows = [line.split() for line in body[num_vertices:]]
        if any(len(row) != 5 for row in face_rows):
            raise MalformedInputError("Face lines must have 5 values")
        face_rows = np.array(
            [[int(i) for i in row] for row in face_rows], dtype=np.int64
        ).reshape(-1, 5)
    except ValueError as e:
        raise MalformedInputError(f"Malformed PLY body: {e}") from e

    if np.any(face_rows[:, 0] != 4):
        raise MalformedInputError("Only quad faces are supported")
    if np.any((colors < 0) | (colors > 255)):
        raise MalformedInputError("Vertex colors must be in 0-255")

    return PlyData(
        vertices=vertices,
        colors=colors.astype(np.uint8),
        faces=face_rows[:, 1:],
        comments=comments,
    )
