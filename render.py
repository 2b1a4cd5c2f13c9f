"""
Rendering Script

Renders a clockwork tree animation to a file with Cairo, without opening
a window.

Configuration is loaded from config/clockwork.json.
The output path defaults to outputs/rendering/<output_name>.gif.
"""

import argparse
import os
from pathlib import Path

from config import load_config, ClockworkConfig, ClockworkRenderConfig
from clockwork import TreeBuilder, Store, Init
from clockwork.profiling import profiler
from rendering import ClockworkRenderer


def remove_if_exists(path: str):
    """Remove file if it exists to ensure fresh write."""
    p = Path(path)
    if p.exists():
        try:
            os.remove(p)
            print(f"Removed existing file: {path}")
        except OSError as e:
            print(f"Error removing {path}: {e}")


def parse_args():
    parser = argparse.ArgumentParser(description="Render a clockwork tree animation")
    parser.add_argument('--config', default='config/clockwork.json', help="Path to JSON config")
    parser.add_argument('--frames', type=int, default=None, help="Number of frames to render")
    parser.add_argument('--fps', type=int, default=None, help="Output frame rate")
    parser.add_argument('--size', type=int, default=None, help="Output width and height in pixels")
    parser.add_argument('--speed', type=float, default=None, help="Rotation speed")
    parser.add_argument('--seed', type=int, default=None, help="Random seed for tree generation")
    parser.add_argument('--output', default=None, help="Output .gif or .mp4 path")
    parser.add_argument('--profile', action='store_true', help="Print engine timings on exit")
    return parser.parse_args()


def main():
    args = parse_args()
    app = load_config(args.config)
    if args.frames is not None:
        app.render_frames = args.frames
    if args.fps is not None:
        app.render_fps = args.fps
    if args.size is not None:
        app.render_size = args.size
    if args.seed is not None:
        app.random_seed = args.seed
    if args.profile:
        app.profile = True

    engine_config = ClockworkConfig.from_app(app)
    render_config = ClockworkRenderConfig.from_app(app)
    if engine_config.profile:
        profiler.enable()

    store = Store(TreeBuilder(engine_config))
    speed = args.speed if args.speed is not None else app.initial_speed
    if not store.dispatch(Init(render_config.output_width, render_config.output_height, speed=speed)):
        raise SystemExit("Could not initialize the clockwork scene")

    output_path = args.output or str(app.render_gif_path)
    app.create_output_dirs()
    remove_if_exists(output_path)

    print(f"Rendering {app.render_frames} frames at "
          f"{render_config.output_width}x{render_config.output_height} with Cairo...")
    renderer = ClockworkRenderer(render_config)
    renderer.render_animation(store, output_path, num_frames=app.render_frames, fps=app.render_fps)


if __name__ == '__main__':
    main()
