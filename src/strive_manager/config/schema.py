"""Data models for discovery state and host environment"""

import os
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping


class Platform(Enum):
    """Host operating systems with known Steam layouts"""
    WINDOWS = "windows"
    MACOS = "macos"
    LINUX = "linux"
    OTHER = "other"

    @classmethod
    def current(cls) -> "Platform":
        """Map ``sys.platform`` onto a Platform.

        Returns:
            The Platform for the running interpreter, OTHER if unknown
        """
        return cls.from_sys_platform(sys.platform)

    @classmethod
    def from_sys_platform(cls, name: str) -> "Platform":
        if name in ("win32", "cygwin"):
            return cls.WINDOWS
        if name == "darwin":
            return cls.MACOS
        if name.startswith("linux"):
            return cls.LINUX
        return cls.OTHER


@dataclass(frozen=True)
class ProbeEnvironment:
    """Host facts the path prober needs, passed in rather than looked up.

    Attributes:
        platform: Host operating system
        env: Environment variable mapping (only HOME is read)
    """
    platform: Platform
    env: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_host(cls) -> "ProbeEnvironment":
        """Capture the real platform and environment of this process."""
        return cls(platform=Platform.current(), env=os.environ)


@dataclass
class DiscoveryState:
    """Outcome of the installation discovery and confirmation cycle.

    Owned and mutated only by DiscoveryController; the GUI reads copies.
    """
    resolved: bool = False
    found: bool = False
    path: str = ""
    awaiting_confirmation: bool = False
    override_input: str = ""
    override_valid: bool = False
    override_checked: bool = False


@dataclass(frozen=True)
class MenuItem:
    """An entry in the main window's feature list"""
    id: int
    title: str
    label: str
