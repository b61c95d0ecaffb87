from __future__ import annotations
import io
import os
import logging
from typing import Iterable, Iterator, List, TextIO

from . import config as CFG

log = logging.getLogger(__name__)

def iter_stream_lines(stream: TextIO) -> Iterator[str]:
    """Yield lines of a text stream without their line terminators."""
    for raw in stream:
        yield raw.rstrip("\r\n")

def split_lines(text: str) -> List[str]:
    """Split a block of text the way a stream is read: only LF (or CRLF) ends a line."""
    return list(iter_stream_lines(io.StringIO(text)))

def _iter_text_files(root: str) -> Iterator[str]:
    """Yield INCLUDE_EXTS files under root, in a stable (sorted) order."""
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames.sort()
        for fn in sorted(filenames):
            if fn.lower().endswith(CFG.INCLUDE_EXTS):
                yield os.path.join(dirpath, fn)

def resolve_paths(paths: Iterable[str]) -> List[str]:
    """
    Expand CLI/web inputs into a list of files.
      * a file is taken as-is (any extension)
      * a directory contributes every INCLUDE_EXTS file underneath
      * anything else raises FileNotFoundError
    """
    files: List[str] = []
    for p in paths:
        if os.path.isdir(p):
            files.extend(_iter_text_files(p))
        elif os.path.isfile(p):
            files.append(p)
        else:
            raise FileNotFoundError(p)
    return files

def iter_file_lines(paths: Iterable[str]) -> Iterator[str]:
    """
    Yield every line of every resolved file, in order.
    Undecodable bytes become U+FFFD, which is a separator like any non-letter.
    Only LF (or CRLF) ends a line; a lone CR stays inside the line as a separator.
    """
    files = resolve_paths(paths)
    count = 0
    for path in files:
        with open(path, "r", encoding=CFG.ENCODING, errors="replace", newline="\n") as f:
            for line in iter_stream_lines(f):
                count += 1
                yield line
        log.info("Read %s", path)
    log.info("Loaded files=%d lines=%d", len(files), count)
