from __future__ import annotations
import os

# Sentinel held by a Token built without a value
DEFAULT_TOKEN: str = "default"

# Rendered between the tokens of one output line
SEPARATOR: str = " "

# Directory roots are scanned for these file types
INCLUDE_EXTS: tuple[str, ...] = (".txt",)
ENCODING: str = "utf-8"

# Progress logging (set KWIC_VERBOSE=1 to enable)
VERBOSE: bool = os.environ.get("KWIC_VERBOSE") == "1"

# /* ~~~ web frontend defaults ~~~ */
WEB_HOST: str = "127.0.0.1"
WEB_PORT: int = int(os.environ.get("KWIC_WEB_PORT", "8000"))
