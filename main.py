"""
Interactive clockwork tree.

Move the pointer away from the center to speed the tree up (left of
center turns it backwards); click to grow a new tree.

Configuration is loaded from config/clockwork.json when present.
"""

import argparse

from config import load_config, ClockworkConfig, ClockworkRenderConfig
from clockwork import TreeBuilder, Store, ClockworkViewer
from clockwork.profiling import profiler


def parse_args():
    parser = argparse.ArgumentParser(description="Animate a clockwork tree")
    parser.add_argument('--config', default='config/clockwork.json', help="Path to JSON config")
    parser.add_argument('--seed', type=int, default=None, help="Random seed for tree generation")
    parser.add_argument('--speed', type=float, default=None, help="Initial rotation speed")
    parser.add_argument('--profile', action='store_true', help="Print engine timings on exit")
    return parser.parse_args()


def main():
    args = parse_args()
    app = load_config(args.config)
    if args.seed is not None:
        app.random_seed = args.seed
    if args.profile:
        app.profile = True

    engine_config = ClockworkConfig.from_app(app)
    if engine_config.profile:
        profiler.enable()

    store = Store(TreeBuilder(engine_config))
    viewer = ClockworkViewer(
        store,
        render_config=ClockworkRenderConfig.from_app(app),
        fps=app.fps,
        window_size=(app.window_width, app.window_height),
        initial_speed=args.speed if args.speed is not None else app.initial_speed,
    )

    print(f"Clockwork tree: {engine_config.max_depth} levels, "
          f"{engine_config.branch_factor} children per branch, {app.fps} fps")
    viewer.show()


if __name__ == '__main__':
    main()
