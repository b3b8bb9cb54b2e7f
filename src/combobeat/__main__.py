"""Entry point for `python -m combobeat` or the `combobeat` console script."""

import argparse
import logging

from combobeat.config import COMMAND_BUFFER_CAPACITY, COMMAND_WINDOW_MS


def main() -> None:
    parser = argparse.ArgumentParser(description="combobeat — rhythm command mini-game")
    parser.add_argument("--capacity", type=int, default=COMMAND_BUFFER_CAPACITY,
                        help="Number of presses the command buffer holds")
    parser.add_argument("--window-ms", type=float, default=COMMAND_WINDOW_MS,
                        help="How long a press stays in the command buffer (ms)")
    parser.add_argument("--no-overwrite", action="store_true",
                        help="Drop presses while the command buffer is full")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    from combobeat.app import App

    app = App(
        capacity=args.capacity,
        window_ms=args.window_ms,
        overwrite_on_full=not args.no_overwrite,
    )
    app.run()


if __name__ == "__main__":
    main()
