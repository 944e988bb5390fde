"""Enumerate and probe default GUILTY GEAR STRIVE install locations"""

from typing import Callable, Iterable, Mapping, Optional

from ..config.path_validator import is_existing_directory
from ..config.paths import GamePaths
from ..config.schema import Platform, ProbeEnvironment
from ..logging_config import get_logger

logger = get_logger("path_prober")


def candidate_paths(platform: Platform, env: Mapping[str, str]) -> tuple[str, ...]:
    """Build the default Paks directory candidates for a platform.

    Home-relative candidates are joined onto ``HOME``; if it is unset the
    empty string is used, which yields a path that will simply not exist.

    Args:
        platform: Host operating system
        env: Environment variable mapping

    Returns:
        Candidate paths in the order they should be tried
    """
    if platform is Platform.WINDOWS:
        return GamePaths.WINDOWS_CANDIDATES

    home = env.get("HOME") or ""

    if platform is Platform.MACOS:
        return (
            GamePaths.MACOS_APP_CANDIDATE,
            home + GamePaths.MACOS_HOME_SUFFIX,
        )
    if platform is Platform.LINUX:
        return tuple(home + suffix for suffix in GamePaths.LINUX_HOME_SUFFIXES)
    return ()


def probe(
    paths: Iterable[str],
    is_dir: Optional[Callable[[str], bool]] = None,
) -> Optional[str]:
    """Find the first candidate that is an existing directory.

    Args:
        paths: Candidate paths, tried in order
        is_dir: Directory check to use; defaults to the real filesystem

    Returns:
        The first matching path, or None if nothing matched
    """
    check = is_dir or is_existing_directory
    for path in paths:
        if check(path):
            logger.debug("Candidate matched: %s", path)
            return path
        logger.debug("Candidate missing: %s", path)
    return None


def probe_host(
    environment: ProbeEnvironment,
    is_dir: Optional[Callable[[str], bool]] = None,
) -> Optional[str]:
    """Probe all default candidates for the given host environment."""
    return probe(candidate_paths(environment.platform, environment.env), is_dir)
