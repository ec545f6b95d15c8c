"""CLI for radial-wheel."""

import argparse
import logging
import sys
from pathlib import Path

from .config import WheelConfig, load_config
from .data import JsonFileProvider, load_data
from .errors import ConfigError
from .interaction import HeadlessHost, RotationController
from .layout import SvgSurface, build_sector_tree, build_wheel, find_sectors, sector_chain
from .visualize import generate_html, generate_json, generate_summary, generate_svg, load_and_build

# Config file keys handled by the CLI rather than WheelConfig
_CLI_KEYS = ("data", "output")

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool = False, log_file: Path | None = None) -> None:
    """Send ``radial_wheel`` log records to stderr, and to ``log_file`` if given.

    Re-running replaces the handlers installed by an earlier call.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger("radial_wheel")
    logger.setLevel(level)
    logger.handlers.clear()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)


def add_common_args(parser: argparse.ArgumentParser) -> None:
    """Add common arguments shared between subcommands."""
    parser.add_argument("--config", type=Path, help="Path to YAML config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", type=Path, help="Also write log messages to this file")


def add_data_args(parser: argparse.ArgumentParser) -> None:
    """Add arguments for subcommands that read the dataset."""
    parser.add_argument(
        "--data",
        type=Path,
        help="Path to the wheel dataset JSON (default: data.json)",
    )
    parser.add_argument("--outer-radius", type=float, help="Outer ring radius")
    parser.add_argument("--middle-radius", type=float, help="Middle ring radius")
    parser.add_argument("--inner-radius", type=float, help="Inner ring radius")
    parser.add_argument("--default-color", type=str, help="Color for categories without one")


def resolve_common_args(args: argparse.Namespace, parser: argparse.ArgumentParser) -> WheelConfig:
    """Resolve config file and command line options into a WheelConfig.

    Command line options take precedence over the config file, which takes
    precedence over the defaults.
    """
    configure_logging(args.verbose, args.log_file)

    file_values: dict = {}
    if args.config:
        try:
            file_values = load_config(args.config)
        except (OSError, ConfigError) as err:
            parser.error(f"Could not read config file: {err}")

    # Options handled by the CLI itself
    for key in _CLI_KEYS:
        if hasattr(args, key) and getattr(args, key) is None and key in file_values:
            setattr(args, key, Path(file_values[key]))

    overrides = {k: v for k, v in file_values.items() if k not in _CLI_KEYS}
    for name in ("outer_radius", "middle_radius", "inner_radius", "default_color"):
        value = getattr(args, name, None)
        if value is not None:
            overrides[name] = value

    try:
        config = WheelConfig.from_mapping(overrides)
    except ConfigError as err:
        parser.error(str(err))

    if hasattr(args, "data") and args.data is None:
        args.data = Path(config.data_file)
    return config


def cmd_render(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """Render the wheel to SVG, HTML, JSON and a summary."""
    config = resolve_common_args(args, parser)
    if args.output is None:
        args.output = Path("results")
    args.output = args.output.resolve()
    args.output.mkdir(parents=True, exist_ok=True)

    print(f"Loading {args.data}...")
    surface, layout = load_and_build(JsonFileProvider(args.data), config)
    if not layout.sectors:
        print("ERROR: Nothing to render. Check that the data file exists and has items.")
        return

    print(
        f"Laid out {layout.total_leaves} items in "
        f"{len(layout.sectors_on('inner'))} categories and "
        f"{len(layout.sectors_on('middle'))} subcategories"
    )

    generate_svg(surface, args.output / "wheel.svg")
    print("Wrote wheel.svg")
    generate_html(surface, args.output / "wheel.html", config, title=args.title)
    print("Wrote wheel.html")
    generate_json(layout, args.output / "wheel.json")
    print("Wrote wheel.json")
    generate_summary(layout, args.output / "summary.txt")
    print("Wrote summary.txt")
    print(f"\nAll outputs written to {args.output}/")


def cmd_trace(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """Find a label and show its chain from category to item."""
    config = resolve_common_args(args, parser)

    data = load_data(JsonFileProvider(args.data))
    if data is None:
        return
    layout = build_wheel(data, SvgSurface(config.size), config)
    tree = build_sector_tree(layout)

    matches = find_sectors(tree, args.label)
    if len(matches) == 0:
        print(f"Error: No label matching '{args.label}'")
        return
    exact = [s for s in matches if s.label.lower() == args.label.lower()]
    if len(matches) > 1 and len(exact) != 1:
        print(f"Error: Ambiguous pattern '{args.label}' matches:")
        for s in matches[:10]:
            print(f"  {s.label} ({s.ring})")
        if len(matches) > 10:
            print(f"  ... and {len(matches) - 10} more")
        return
    target = exact[0] if exact else matches[0]

    for i, sector in enumerate(sector_chain(tree, target.id)):
        indent = "  " * i
        arrow = "-> " if i > 0 else ""
        print(f"{indent}{arrow}{sector.label}  [{sector.start:.2f}, {sector.end:.2f}) deg")


def cmd_coast(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """Simulate releasing the wheel at a given angular velocity."""
    config = resolve_common_args(args, parser)

    host = HeadlessHost()
    controller = RotationController(host, config)
    controller.fling(args.velocity)
    frames = host.run_until_idle()

    print(f"Released at {args.velocity:g} deg/tick (decay {config.decay:g}, stop below {config.stop_threshold:g})")
    print(f"Coasted for {frames} ticks, final rotation {controller.state.rotation:.3f} deg")
    if args.verbose:
        for i, rotation in enumerate(host.rotations, start=1):
            print(f"  tick {i:3d}: {rotation:9.3f} deg")


def main() -> None:
    """Main entry point for radial-wheel CLI."""
    parser = argparse.ArgumentParser(description="Render rotatable sunburst wheels")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    render_parser = subparsers.add_parser(
        "render",
        help="Render the wheel to SVG and an interactive HTML page",
    )
    add_common_args(render_parser)
    add_data_args(render_parser)
    render_parser.add_argument(
        "--output",
        type=Path,
        help="Output directory (default: results)",
    )
    render_parser.add_argument("--title", default="Wheel", help="HTML page title")

    trace_parser = subparsers.add_parser(
        "trace",
        help="Show where a label sits on the wheel",
    )
    add_common_args(trace_parser)
    add_data_args(trace_parser)
    trace_parser.add_argument(
        "--label",
        required=True,
        help="Label to find (case-insensitive substring match)",
    )

    coast_parser = subparsers.add_parser(
        "coast",
        help="Simulate inertial coasting after a release",
    )
    add_common_args(coast_parser)
    coast_parser.add_argument(
        "--velocity",
        type=float,
        default=2.0,
        help="Release velocity in degrees per tick (default: 2.0)",
    )

    args = parser.parse_args()

    if args.command == "render":
        cmd_render(args, render_parser)
    elif args.command == "trace":
        cmd_trace(args, trace_parser)
    elif args.command == "coast":
        cmd_coast(args, coast_parser)
    else:
        # No subcommand provided - show help
        parser.print_help()


if __name__ == "__main__":
    main()
