"""Command line entry point."""

from __future__ import annotations

import argparse
import sys

from kgplayer.pages import PageKind
from kgplayer.player import MusicPlayer


def main(argv: list[str] | None = None) -> int:
    """Load audio files, list them, and optionally show lyrics of the first."""
    parser = argparse.ArgumentParser(
        prog="kgplayer", description="List local music and show its lyrics."
    )
    parser.add_argument("files", nargs="*", help="audio files to add")
    parser.add_argument(
        "--lyrics-at",
        type=int,
        metavar="MS",
        help="show the lyrics of the first track at this position in milliseconds",
    )
    args = parser.parse_args(argv)

    player = MusicPlayer()
    added = player.add_local_files(args.files)
    if not added:
        print("no audio files given", file=sys.stderr)
        return 1

    for row, item in enumerate(player.pages[PageKind.LOCAL].items, start=1):
        print(f"{row:>3}  {item.name}\t{item.singer}\t{item.album}")

    if args.lyrics_at is not None:
        player.play_page(PageKind.LOCAL, 0)
        for line in player.on_position_changed(args.lyrics_at) or []:
            print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())