"""Core business logic module.

This module contains installation discovery for GUILTY GEAR STRIVE.

Submodules:
    path_prober: Default Steam candidate paths per platform and the probe loop
    discovery: DiscoveryController, the confirm/reject/retry state machine

Discovery only looks for the game's RED/Content/Paks directory; the single
thing it ever writes is the ~mods directory beneath it.
"""

from .discovery import DiscoveryController
from .path_prober import candidate_paths, probe, probe_host

__all__ = [
    "DiscoveryController",
    "candidate_paths",
    "probe",
    "probe_host",
]
