"""
Command-Line Interface for Voxel Export

Usage:
    voxexport volume.npy -o model --format obj ply
    voxexport volume.npy -o model.obj --block-size 32 -v
    voxexport --info model.obj

"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional
import time

import numpy as np

from .blocks import Mesh
from .config import BLOCK_SIZE
from .errors import ExportError
from .exporter import wavefront_export, ply_export
from .exporters import read_obj, read_ply

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="voxexport",
        description="Voxel Export - Convert block-based voxel volumes to OBJ and PLY",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  voxexport volume.npy -o model
      Export volume.npy (an (X, Y, Z, 4) uint8 RGBA array) to model.obj

  voxexport volume.npy -o model --format obj ply
      Export to both model.obj and model.ply

  voxexport --info model.ply
      Print vertex and face counts of an exported file
        """
    )

    parser.add_argument(
        "input",
        nargs="?",
        help="Input volume (.npy, shape (X, Y, Z, 4), uint8 RGBA)"
    )

    parser.add_argument(
        "-o", "--output",
        help="Output file path (suffix is replaced per format)"
    )

    parser.add_argument(
        "-f", "--format",
        nargs="+",
        choices=["obj", "ply"],
        default=["obj"],
        help="Output format(s) (default: obj)"
    )

    parser.add_argument(
        "--block-size",
        type=int,
        default=BLOCK_SIZE,
        help=f"Block edge length in voxels (default: {BLOCK_SIZE})"
    )

    parser.add_argument(
        "--info",
        metavar="FILE",
        help="Print statistics of an exported .obj or .ply file and exit"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output with statistics"
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 1.0.0"
    )

    return parser


def print_info(path: Path) -> int:
    """Print counts read back from an exported file."""
    if path.suffix.lower() == ".obj":
        data = read_obj(path)
        print(f"{path}:")
        print(f"  Vertices: {len(data.vertices)}")
        print(f"  Normals: {len(data.normals)}")
        print(f"  Faces: {len(data.face_vertices)}")
    elif path.suffix.lower() == ".ply":
        data = read_ply(path)
        print(f"{path}:")
        print(f"  Vertices: {len(data.vertices)}")
        print(f"  Faces: {len(data.faces)}")
    else:
        print(f"Error: Unsupported file type: {path.suffix}", file=sys.stderr)
        return 1
    return 0


def process_volume(args) -> int:
    """Export a single volume file."""
    if not args.input:
        print("Error: No input file specified", file=sys.stderr)
        return 1

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: Input file not found: {input_path}", file=sys.stderr)
        return 1

    output_base = Path(args.output) if args.output else input_path.with_suffix("")
    start_time = time.time()

    volume = np.load(input_path)
    logger.info("Loaded %s with shape %s", input_path, volume.shape)
    mesh = Mesh.from_volume(volume, block_size=args.block_size)

    for fmt in args.format:
        if fmt == "obj":
            output_path = output_base.with_suffix(".obj")
            stats = wavefront_export(mesh, output_path)
        else:
            output_path = output_base.with_suffix(".ply")
            stats = ply_export(mesh, output_path)

        if args.verbose:
            print(f"Exported: {output_path}")
            print(f"  Blocks: {stats.blocks}")
            print(f"  Quads: {stats.quads}")
            print(f"  Vertices: {stats.vertices}")
            if fmt == "obj":
                print(f"  Normals: {stats.normals}")
            print(f"  Faces: {stats.faces}")

    elapsed = time.time() - start_time
    if args.verbose:
        print(f"\nCompleted in {elapsed:.2f}s")

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    try:
        if args.info:
            return print_info(Path(args.info))
        return process_volume(args)

    except (OSError, ValueError, ExportError) as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
