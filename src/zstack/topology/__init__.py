from zstack.topology.builder import build
from zstack.topology.geometry import GeometryRecord, elevation, resolve
from zstack.topology.matcher import MatchedEntry, derive_selector, match_elements
from zstack.topology.model import (
    RankedRow,
    ResolvedEntry,
    RulesOnly,
    RulesWithGeometry,
    TopologyModel,
)

__all__ = [
    # matching
    "MatchedEntry",
    "derive_selector",
    "match_elements",
    # geometry
    "GeometryRecord",
    "elevation",
    "resolve",
    # model
    "TopologyModel",
    "RulesOnly",
    "RulesWithGeometry",
    "ResolvedEntry",
    "RankedRow",
    "build",
]
