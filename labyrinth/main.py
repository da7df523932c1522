import argparse
import sys
import os
import logging

# Ensure project root is in path so we can import 'labyrinth' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

# Square sizes offered by the size picker
SIZE_CHOICES = [5, 10, 15, 20, 30, 50, 70]


def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def build_parser():
    parser = argparse.ArgumentParser(description="Labyrinth: perfect maze generator and walker")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    gen_parser = subparsers.add_parser("generate", help="Generate a new maze")
    gen_parser.add_argument("--size", type=int, default=SIZE_CHOICES[0], choices=SIZE_CHOICES, help="Square maze size")
    gen_parser.add_argument("--rows", type=int, default=None, help="Row count (overrides --size)")
    gen_parser.add_argument("--cols", type=int, default=None, help="Column count (overrides --size)")
    gen_parser.add_argument("--algo", type=str, default="dfs", choices=["dfs", "prim"], help="Generation Algorithm")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    gen_parser.add_argument("--visual", action="store_true", help="Animate generation and play in a window")
    gen_parser.add_argument("--steps-per-frame", type=int, default=1, help="Generation steps per rendered frame")
    gen_parser.add_argument("--ascii", action="store_true", help="Print the finished maze as text")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("labyrinth")

    if args.command is None:
        parser.print_help()
        return

    logger.info(f"Running command: {args.command}")

    if args.command == "generate":
        from labyrinth.api import build_grid, start_generation
        from labyrinth.core.errors import InvalidDimension

        rows = args.rows if args.rows is not None else args.size
        cols = args.cols if args.cols is not None else args.size

        try:
            grid = build_grid(rows, cols, seed=args.seed)
        except InvalidDimension as e:
            parser.error(str(e))

        logger.info(f"Generating {rows}x{cols} maze with {args.algo.upper()}...")
        # Offset so grid placement and carving don't share a draw sequence
        generator = start_generation(grid, args.algo, seed=None if args.seed is None else args.seed + 1)

        if args.visual:
            logger.info("Visual mode enabled - Opening window...")
            from labyrinth.viz.renderer import Renderer
            renderer = Renderer(grid, generator=generator, steps_per_frame=args.steps_per_frame)
            renderer.init_window()
            renderer.run_loop()
        else:
            logger.info("Headless generation...")
            generator.run_all()

        if generator.complete:
            from labyrinth.core.complexity import MazeAnalyzer
            stats = MazeAnalyzer.calculate_stats(grid)
            logger.info(f"Stats: {stats}")
            logger.debug(f"Perfect: {MazeAnalyzer.is_perfect(grid)}")

        if args.ascii:
            from labyrinth.viz.ascii import render_ascii
            print(render_ascii(grid))

        logger.info(f"Start {grid.start.position}, goal {grid.goal.position}")


if __name__ == "__main__":
    main()
