"""
Call-site trace markers.

Every emitted group carries a short stack excerpt pointing at the code
that made the log call. It is display-only provenance and never affects
whether a message is shown.
"""

import traceback
from pathlib import Path


_PACKAGE_DIR = Path(__file__).resolve().parent


def _is_internal(filename: str) -> bool:
    try:
        return Path(filename).resolve().parent == _PACKAGE_DIR
    except (OSError, ValueError):
        return False


def capture_trace(limit: int = 5) -> str:
    """Format the caller's stack, innermost frame first.

    Frames belonging to this package are dropped so the marker starts at
    the application's own call to log()/warn()/a tag function.

    Args:
        limit: Maximum number of frames to keep

    Returns:
        A "Trace" block in the usual traceback layout.
    """
    frames = [f for f in traceback.extract_stack() if not _is_internal(f.filename)]
    frames = frames[-limit:] if limit else frames
    lines = ["Trace"]
    for frame in reversed(frames):
        lines.append(f"    at {frame.name} ({frame.filename}:{frame.lineno})")
    return "\n".join(lines)
