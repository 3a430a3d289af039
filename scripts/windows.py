"""CLI wrapper to print the windows of a text."""

from __future__ import annotations

import argparse

from gradient_slice import gradient


def main() -> None:
    parser = argparse.ArgumentParser(description="Print every contiguous window of a text")
    parser.add_argument("text", help="Text to enumerate")
    parser.add_argument("--max-width", type=int, help="Largest window width to produce")
    args = parser.parse_args()

    for window in gradient(args.text, max_width=args.max_width):
        print(repr(window.join()))


if __name__ == "__main__":
    main()
