"""Command-line interface for terrain generation."""

import argparse
import logging
import sys
import time
from pathlib import Path

import structlog


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for terrain generation."""
    parser = argparse.ArgumentParser(
        description="Generate a side-view island world grid"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Config name (from world/configs) or path to a TOML file",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed (overrides config)"
    )
    parser.add_argument(
        "--columns", type=int, default=None, help="Grid columns (overrides config)"
    )
    parser.add_argument(
        "--rows", type=int, default=None, help="Grid rows (overrides config)"
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default=None,
        help="Path for the generated grid (.npz)",
    )
    parser.add_argument(
        "--image",
        type=str,
        default=None,
        help="Path for a PNG preview (optional)",
    )
    parser.add_argument(
        "--validate", action="store_true", help="Check terrain invariants after generating"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose logging"
    )

    args = parser.parse_args(argv)

    # Configure logging
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )

    # Import here to avoid slow startup for --help
    from ..config import find_config, load_config
    from ..exceptions import WorldError
    from .config import TerrainConfig
    from .generator import generate_terrain
    from .persistence import save_grid
    from .preview import render_image
    from .validation import validate_terrain

    try:
        config = load_config(find_config(args.config)) if args.config else TerrainConfig()
    except (FileNotFoundError, WorldError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    overrides: dict = {}
    if args.seed is not None:
        overrides["seed"] = args.seed
    grid_overrides = {
        key: value
        for key, value in (("columns", args.columns), ("rows", args.rows))
        if value is not None
    }
    if grid_overrides:
        overrides["grid"] = config.grid.model_copy(update=grid_overrides)
    if overrides:
        config = config.model_copy(update=overrides)

    print(
        f"Generating {config.grid.columns}x{config.grid.rows} terrain "
        f"with seed {config.seed}"
    )
    print()

    start_time = time.time()
    try:
        result = generate_terrain(config)
    except WorldError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    gen_time = time.time() - start_time

    print()
    print(f"Generation complete in {gen_time * 1000:.0f}ms")
    print(f"  Water cells: {result.water_cells:,}")
    print(f"  Sand cells:  {result.sand_cells:,}")

    status = 0
    if args.validate:
        validation = validate_terrain(result.grid, config, result.layout, result.profiles)
        if not validation.passed:
            status = 1

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        written = save_grid(output_path, result.grid, config)
        print(f"Saved to {written}")

    if args.image:
        image_path = Path(args.image)
        image_path.parent.mkdir(parents=True, exist_ok=True)
        render_image(result.grid, scale=2).save(image_path)
        print(f"Preview saved to {image_path}")

    return status


if __name__ == "__main__":
    sys.exit(main())
