"""Path checks and normalization for installation discovery.

Provides:
- A fault-tolerant "existing directory" test for candidate paths
- Normalization of user-typed game folders into the Paks layout
"""

from pathlib import Path

from .paths import GamePaths
from ..logging_config import get_logger

logger = get_logger("path_validator")


def is_existing_directory(path: str) -> bool:
    """Check whether a path is an existing directory.

    Symlinks are followed, so a dangling link or a link to a file is not a
    match. Any error raised while querying the filesystem is treated as
    "not found".

    Args:
        path: The candidate path

    Returns:
        True if the path exists and is a directory
    """
    if not path:
        return False

    try:
        return Path(path).is_dir()
    except (OSError, ValueError) as e:
        logger.debug("Could not check %s: %s", path, e)
        return False


def normalize_manual_path(raw_text: str) -> str:
    """Turn user input into the expected Paks directory path.

    The game folder (e.g. ``/games/ggst``) is extended with
    ``RED/Content/Paks/``; input that already ends with
    ``/RED/Content/Paks/`` is returned trimmed but otherwise unchanged.

    Args:
        raw_text: Text exactly as typed by the user

    Returns:
        The candidate Paks path

    Examples:
        >>> normalize_manual_path("/some/dir")
        '/some/dir/RED/Content/Paks/'
        >>> normalize_manual_path("  /some/dir/RED/Content/Paks/ ")
        '/some/dir/RED/Content/Paks/'
    """
    candidate = raw_text.strip()
    if candidate.endswith(GamePaths.PAKS_SUFFIX):
        return candidate

    if not candidate.endswith("/"):
        candidate += "/"
    return candidate + GamePaths.PAKS_RELATIVE
