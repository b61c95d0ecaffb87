from __future__ import annotations
import argparse, json, os, sys
from dataclasses import asdict

from .engine import Engine
from .errors import OutOfRange
from .loader import iter_file_lines, iter_stream_lines, resolve_paths

BANNER = "=== KWIC - Keyword in Context ===\nEnter lines of text (Ctrl+D to finish):\n"

def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="kwic", description="KWIC index: every rotation of every line, sorted")
    p.add_argument("paths", nargs="*", help="Files or folders to read (default: stdin)")
    p.add_argument("--json", action="store_true", help="Emit JSON entries instead of plain lines")
    p.add_argument("--rank", type=int, default=None, help="Print only the entry at this rank (negative counts from the end)")
    p.add_argument("--banner", action="store_true", help="Print the input banner on stderr")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    if args.verbose:
        os.environ["KWIC_VERBOSE"] = "1"

    if args.paths:
        try:
            resolve_paths(args.paths)
        except FileNotFoundError as e:
            p.error(f"no such file or directory: {e}")
        lines = iter_file_lines(args.paths)
    else:
        if args.banner:
            print(BANNER, file=sys.stderr)
        # same line splitting as files: a lone CR is not a line break
        if hasattr(sys.stdin, "reconfigure"):
            sys.stdin.reconfigure(newline="\n")
        lines = iter_stream_lines(sys.stdin)

    eng = Engine(verbose=args.verbose)
    try:
        eng.build(lines)

        if args.rank is not None:
            try:
                e = eng.entry(args.rank)
            except OutOfRange as err:
                print(f"kwic: {err}", file=sys.stderr)
                return 1
            print(json.dumps(asdict(e), ensure_ascii=False) if args.json else e.text)
            return 0

        if args.json:
            print(json.dumps([asdict(e) for e in eng.entries()], ensure_ascii=False, indent=2))
        else:
            eng.write(sys.stdout)
        return 0
    finally:
        eng.shutdown()

if __name__ == "__main__":
    raise SystemExit(main())
