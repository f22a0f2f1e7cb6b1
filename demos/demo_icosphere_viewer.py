import os
import sys
import math
import logging
import argparse

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from PyIcoSphereLib.logging_config import setup_logging
from PyIcoSphereLib.core.sphere import IcosphereBuilder
from PyIcoSphereLib.visualization.pyvista_backend import IcosphereViewer, ViewerConfig


def main():
    parser = argparse.ArgumentParser(description="Interactive icosphere viewer (Up/Down change depth)")
    parser.add_argument('--depth', type=int, default=0)
    parser.add_argument('--max_depth', type=int, default=6)
    parser.add_argument('--index_bits', type=int, choices=(16, 32, 64), default=None)
    parser.add_argument('--width', type=int, default=600)
    parser.add_argument('--height', type=int, default=400)
    parser.add_argument('--angular_velocity', type=float, default=0.1 * math.pi)
    parser.add_argument('--edge_color', type=str, default='white')
    parser.add_argument('--background', type=str, default='black')
    parser.add_argument('--screenshot', type=str, default=None)
    parser.add_argument('--off_screen', action='store_true')
    parser.add_argument('--log_level', type=str, default='INFO')
    parser.add_argument('--log_file', type=str, default=None)
    args = parser.parse_args()

    setup_logging(getattr(logging, args.log_level.upper(), logging.INFO), args.log_file)

    index_dtype = None if args.index_bits is None else f"uint{args.index_bits}"
    builder = IcosphereBuilder(max_depth=args.max_depth, index_dtype=index_dtype)
    cfg = ViewerConfig(
        window_size=(args.width, args.height),
        initial_depth=max(0, args.depth),
        max_depth=args.max_depth,
        angular_velocity=args.angular_velocity,
        edge_color=args.edge_color,
        background=args.background,
        off_screen=args.off_screen,
    )
    viewer = IcosphereViewer(cfg, builder=builder)
    viewer.show(screenshot=os.path.abspath(args.screenshot) if args.screenshot else None)


if __name__ == '__main__':
    main()
