"""Installation discovery and confirmation state machine"""

from dataclasses import replace
from pathlib import Path
from typing import Callable, Optional

from ..config.path_validator import normalize_manual_path
from ..config.paths import GamePaths
from ..config.schema import DiscoveryState, ProbeEnvironment
from ..logging_config import get_logger
from .path_prober import candidate_paths, probe

logger = get_logger("discovery")


class DiscoveryController:
    """Find the game's Paks directory and walk the user through confirming it.

    The cycle is:
    - run_automatic_discovery() probes the default Steam locations once
    - the GUI shows the result until confirm() or reject() is called
    - after a rejection or a miss, submit_override() checks a user-typed path
    - confirm() creates the ~mods directory under the accepted path

    All state lives in a DiscoveryState that only this class mutates.
    """

    def __init__(
        self,
        environment: Optional[ProbeEnvironment] = None,
        is_dir: Optional[Callable[[str], bool]] = None,
    ):
        """Initialize the controller.

        Args:
            environment: Host platform and environment; defaults to this process
            is_dir: Directory check override, used by tests
        """
        self.environment = environment or ProbeEnvironment.from_host()
        self._is_dir = is_dir
        self._state = DiscoveryState()

    # Read accessors
    @property
    def state(self) -> DiscoveryState:
        """A copy of the current discovery state."""
        return replace(self._state)

    @property
    def resolved(self) -> bool:
        return self._state.resolved

    @property
    def found(self) -> bool:
        return self._state.found

    @property
    def path(self) -> str:
        return self._state.path

    @property
    def awaiting_confirmation(self) -> bool:
        return self._state.awaiting_confirmation

    @property
    def override_input(self) -> str:
        return self._state.override_input

    @property
    def override_valid(self) -> bool:
        return self._state.override_valid

    @property
    def override_checked(self) -> bool:
        return self._state.override_checked

    @property
    def mods_path(self) -> Optional[Path]:
        """The ~mods directory for the current path, or None if nothing is found."""
        if not self._state.found:
            return None
        return GamePaths.mods_dir_for(self._state.path)

    # Operations
    def run_automatic_discovery(self) -> None:
        """Probe the default install locations for this platform.

        Does nothing once a result exists; only a manual check starts a new
        discovery cycle.
        """
        if self._state.resolved:
            logger.debug("Discovery already resolved, skipping automatic probe")
            return

        platform = self.environment.platform
        candidates = candidate_paths(platform, self.environment.env)
        logger.info(f"Probing {len(candidates)} default location(s) for {platform.value}")
        self._resolve(probe(candidates, self._is_dir))

        if self._state.found:
            logger.info(f"Game found at {self._state.path}")
        else:
            logger.info("Game not found at any default location")

    def check_manual_path(self, candidate: str) -> bool:
        """Check a single, already normalized, user-supplied path.

        Args:
            candidate: Paks directory path built from user input

        Returns:
            True if the path is an existing directory
        """
        self._state.resolved = False
        self._resolve(probe((candidate,), self._is_dir))

        self._state.override_checked = True
        self._state.override_valid = self._state.found and self._state.path == candidate

        logger.info(f"Manual path {candidate!r}: {'found' if self._state.found else 'not found'}")
        return self._state.found

    def submit_override(self, raw_text: str) -> bool:
        """Record user input, normalize it, and check it.

        Args:
            raw_text: Game folder exactly as typed by the user

        Returns:
            True if the normalized path exists
        """
        self._state.override_input = raw_text
        return self.check_manual_path(normalize_manual_path(raw_text))

    def confirm(self) -> Optional[Path]:
        """Accept the found path and create its ~mods directory.

        Creation problems are logged and otherwise ignored; the confirmation
        still completes.

        Returns:
            Path to the ~mods directory if it exists afterwards, None otherwise
        """
        if not self._state.found:
            logger.warning("Confirm requested without a found installation, ignoring")
            return None

        mods_path = GamePaths.mods_dir_for(self._state.path)
        created: Optional[Path] = None
        try:
            mods_path.mkdir(parents=True, exist_ok=True)
            created = mods_path
            logger.info(f"Mods directory ready at {mods_path}")
        except OSError as e:
            logger.error(f"Failed to create mods directory {mods_path}: {e}")

        self._state.awaiting_confirmation = False
        return created

    def reject(self) -> None:
        """Discard the found path so the user can enter one manually."""
        if not (self._state.awaiting_confirmation and self._state.found):
            logger.debug("Reject requested with nothing to reject, ignoring")
            return

        logger.info(f"User rejected {self._state.path}")
        self._state.found = False

    def _resolve(self, match: Optional[str]) -> None:
        """Store a probe result and open the confirmation step."""
        self._state.found = match is not None
        self._state.path = match if match is not None else GamePaths.NOT_FOUND
        self._state.resolved = True
        self._state.awaiting_confirmation = True
