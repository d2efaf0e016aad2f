import os
import sys
import argparse
import logging
import matplotlib.pyplot as plt

# Add project root to sys.path to find src
current_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.join(current_dir, "..")
sys.path.append(os.path.join(project_root, "src"))

from routeclean.config import DEFAULT_NOISE_RATIO
from routeclean.core.stream import read_route, write_route
from routeclean.errors import RouteCleanError
from routeclean.metrics import calculate_average_speed, calculate_noise_fraction
from routeclean.modules.noise_filter import NoiseFilter

logger = logging.getLogger("clean_route")


def plot_cleaning_results(raw_points, kept_points, noise_points, output_img, input_filename):
    """Draws the raw route, the cleaned route and the removed fixes on one axis."""
    fig, ax = plt.subplots(figsize=(12, 12))

    if raw_points:
        ax.plot([p.lon for p in raw_points], [p.lat for p in raw_points],
                color='gray', linewidth=1, alpha=0.5, label='Raw route')
    if kept_points:
        ax.plot([p.lon for p in kept_points], [p.lat for p in kept_points],
                color='blue', linewidth=2, marker='o', markersize=3, label='Cleaned route')
    if noise_points:
        ax.scatter([p.lon for p in noise_points], [p.lat for p in noise_points],
                   color='red', marker='x', s=60, zorder=3, label='Noise')

    ax.set_xlabel("Longitude")
    ax.set_ylabel("Latitude")
    ax.set_title(f"Noise removal ({input_filename})")
    ax.legend()

    plt.tight_layout()
    plt.savefig(output_img, dpi=150, bbox_inches='tight')
    plt.close(fig)
    logger.info("Visualization saved to %s", output_img)


def build_parser():
    parser = argparse.ArgumentParser(description="Remove noisy fixes from a GPS journey.")
    parser.add_argument("input", help="Headerless lat,lon,timestamp CSV file.")
    parser.add_argument(
        "--ratio",
        type=float,
        default=DEFAULT_NOISE_RATIO,
        help="Multiples of the average speed before a transition is suspicious (default: %(default)s).",
    )
    parser.add_argument(
        "--noise",
        action="store_true",
        help="Output the removed points instead of the cleaned route.",
    )
    parser.add_argument("--output", help="Output CSV path. Defaults to stdout.")
    parser.add_argument("--plot", help="Save a PNG plot of the result to this path.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        noise_filter = NoiseFilter(ratio=args.ratio)
        route = read_route(args.input)
    except (RouteCleanError, ValueError) as e:
        logger.error("%s", e)
        return 1

    raw_points = list(route)
    kept, noise = noise_filter.classify(raw_points)

    avg_speed = calculate_average_speed(raw_points)
    logger.info(
        "Points: %d, kept: %d, noise: %d (%.1f%%)",
        len(raw_points), len(kept), len(noise),
        calculate_noise_fraction(raw_points, noise) * 100,
    )
    if avg_speed is not None:
        logger.info("Average speed: %.2f km/h, noise margin: %.2f km/h",
                    avg_speed, avg_speed * noise_filter.ratio)

    selected = noise if args.noise else kept
    write_route(selected, args.output if args.output else sys.stdout)

    if args.plot:
        input_filename = os.path.splitext(os.path.basename(args.input))[0]
        plot_cleaning_results(raw_points, kept, noise, args.plot, input_filename)

    return 0


if __name__ == "__main__":
    sys.exit(main())
