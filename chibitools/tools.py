"""Asset preparation commands: image conversion and font character collection."""

from __future__ import annotations

import argparse
import logging
import shutil
from pathlib import Path

from chibitools.imageconverter import convert

_log = logging.getLogger(__name__)

_SKIPPED_DIRS = {"image", "audio", "fonts"}


def _is_hanzi(ch: str) -> bool:
    return 0x4E00 <= ord(ch) <= 0x9FA5


def collect_hanzi(game_dir: str | Path, output: str | Path) -> str:
    """Gather distinct CJK ideographs used in the game's text files.

    Files directly inside each subdirectory of ``game_dir`` (except the
    image, audio and fonts directories) are scanned. The characters are kept
    in first-seen order, written to ``output`` as UTF-8 and returned.
    """
    seen: dict[str, None] = {}
    for entry in sorted(Path(game_dir).iterdir()):
        if entry.is_file():
            _log.debug("%s", entry.resolve())
            continue
        if not entry.is_dir() or entry.name.split(".")[0] in _SKIPPED_DIRS:
            continue
        for child in sorted(entry.iterdir()):
            if child.is_file():
                text = child.read_bytes().decode("utf-8", errors="replace")
                seen.update((ch, None) for ch in text if _is_hanzi(ch))
    result = "".join(seen)
    Path(output).write_bytes(result.encode("utf-8"))
    return result


def clear_dir(path: str | Path) -> bool:
    """Delete everything inside a directory; False if it is not there."""
    if not str(path):
        return False
    directory = Path(path)
    if not directory.is_dir():
        return False
    for entry in directory.iterdir():
        if entry.is_dir() and not entry.is_symlink():
            shutil.rmtree(entry)
        else:
            entry.unlink()
    return True


def convert_images(source_dir: str | Path, image_dir: str | Path) -> list[Path]:
    """Empty ``image_dir`` and convert every PNG in ``source_dir`` into it."""
    image_dir = Path(image_dir)
    clear_dir(image_dir)
    targets = []
    for png in sorted(Path(source_dir).iterdir()):
        if png.is_file() and png.suffix.lower() == ".png":
            target = image_dir / png.name[:-4]
            convert(png, target)
            targets.append(target)
    return targets


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(prog="chibitools")
    commands = parser.add_subparsers(dest="command", required=True)
    images = commands.add_parser("images", help="convert PNG files to binary images")
    images.add_argument("source_dir")
    images.add_argument("image_dir")
    hanzi = commands.add_parser("hanzi", help="collect the characters used by the game")
    hanzi.add_argument("game_dir")
    hanzi.add_argument("output")
    args = parser.parse_args(argv)

    if args.command == "images":
        for target in convert_images(args.source_dir, args.image_dir):
            print(target)
    else:
        print(collect_hanzi(args.game_dir, args.output))
    return 0