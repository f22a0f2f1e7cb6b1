import os
import sys
import logging
import argparse

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from PyIcoSphereLib.logging_config import setup_logging
from PyIcoSphereLib.core.sphere import IcosphereBuilder, DepthTooLarge
from PyIcoSphereLib.core.mesh import Mesh
from PyIcoSphereLib.io.obj import save_obj


def main(argv=None):
    parser = argparse.ArgumentParser(description="Write an icosphere to a Wavefront OBJ file")
    parser.add_argument('--depth', type=int, required=True)
    parser.add_argument('--out', type=str, required=True)
    parser.add_argument('--index_bits', type=int, choices=(16, 32, 64), default=32)
    parser.add_argument('--radius', type=float, default=1.0)
    parser.add_argument('--log_level', type=str, default='INFO')
    args = parser.parse_args(argv)

    logger = setup_logging(getattr(logging, args.log_level.upper(), logging.INFO))
    if args.depth < 0:
        parser.error('--depth must be non-negative')

    builder = IcosphereBuilder(index_dtype=f"uint{args.index_bits}")
    try:
        mesh = builder.build(args.depth)
    except DepthTooLarge as e:
        logger.error("%s", e)
        return 2
    if args.radius != 1.0:
        mesh = Mesh(V=args.radius * mesh.V, F=mesh.F)
    save_obj(mesh, args.out)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
