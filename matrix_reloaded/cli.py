"""
matrix-reloaded CLI
===================

Usage:
  matrix-reloaded [FILE]            Watch FILE (or the first .decisions/*.json)
  matrix-reloaded -p 8080 [FILE]    Serve on another port
  matrix-reloaded --instructions    Print the file format documentation
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Union

from matrix_reloaded.core.config import settings
from matrix_reloaded.core.exceptions import NoFileError
from matrix_reloaded.instructions import print_instructions


def parse_port(value: str) -> int:
    """Port number, falling back to the default for anything that isn't a positive integer."""
    try:
        port = int(value)
    except (TypeError, ValueError):
        return settings.server.default_port
    return port if port > 0 else settings.server.default_port


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="matrix-reloaded",
        description="Live viewer and Excel exporter for JSON decision matrices.",
        epilog=f"Without FILE, the first .json file in ./{settings.server.decisions_dir}/ is used.",
    )
    parser.add_argument("file", nargs="?", metavar="FILE", help="Decision matrix JSON file")
    parser.add_argument(
        "-p", "--port",
        type=parse_port,
        default=settings.server.default_port,
        help=f"Port to listen on (default: {settings.server.default_port})",
    )
    parser.add_argument(
        "-i", "--instructions",
        action="store_true",
        help="Print the decision matrix format and exit",
    )
    return parser


def find_default_file(decisions_dir: Union[str, Path]) -> Optional[Path]:
    """First .json file (by name) in the decisions directory, if there is one."""
    decisions_dir = Path(decisions_dir)
    if not decisions_dir.is_dir():
        return None
    candidates = sorted(p for p in decisions_dir.iterdir() if p.suffix == ".json" and p.is_file())
    return candidates[0] if candidates else None


def resolve_file_path(file_arg: Optional[str], decisions_dir: Union[str, Path, None] = None) -> Path:
    """
    Resolve the file to watch.

    Raises NoFileError when no file was given and none was found,
    FileNotFoundError when the resolved path doesn't exist.
    """
    decisions_dir = decisions_dir or settings.server.decisions_dir
    file_path = Path(file_arg) if file_arg else find_default_file(decisions_dir)
    if file_path is None:
        raise NoFileError(decisions_dir)

    file_path = file_path.resolve()
    if not file_path.is_file():
        raise FileNotFoundError(f"File not found: {file_path}")
    return file_path


def serve(file_path: Path, port: int) -> None:
    import uvicorn
    from matrix_reloaded.main import create_app

    app = create_app(file_path)
    uvicorn.run(
        app,
        host=settings.server.host,
        port=port,
        log_level="warning",
        timeout_graceful_shutdown=settings.server.shutdown_timeout,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.instructions:
        print_instructions()
        return 0

    try:
        file_path = resolve_file_path(args.file)
    except NoFileError:
        print("No decision matrix file found.", file=sys.stderr)
        print("Either specify a file: matrix-reloaded <file.json>", file=sys.stderr)
        print(f"Or create one in ./{settings.server.decisions_dir}/", file=sys.stderr)
        return 1
    except FileNotFoundError as e:
        print(str(e), file=sys.stderr)
        return 1

    print(f"Watching: {file_path}")
    print(f"Server:   http://localhost:{args.port}")

    serve(file_path, args.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
