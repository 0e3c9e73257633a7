"""
Node models for the road network system.

A single node type represents both plain map locations and contraction-aware
vertices: the contraction fields are always present and simply stay unset until
the node is contracted.
"""

import math
from dataclasses import dataclass
from typing import Iterable, Optional

from ..exceptions import ContractionError
from .base import validate_coordinate

EARTH_RADIUS_M = 6_371_000.0


def great_circle_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Haversine distance in meters between two latitude/longitude pairs."""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dphi = phi2 - phi1
    dlambda = math.radians(lon2 - lon1)
    a = math.sin(dphi / 2.0) ** 2 + (
        math.cos(phi1) * math.cos(phi2) * (math.sin(dlambda / 2.0) ** 2)
    )
    return 2.0 * EARTH_RADIUS_M * math.asin(min(1.0, math.sqrt(max(0.0, a))))


@dataclass(eq=False)
class Node:
    """
    A physical location in the road network.

    Nodes represent both spots along a road and named places; many named places
    have no edges at all and are therefore never contracted.

    Attributes:
        id (int): Unique 64-bit identifier
        lat (float): Latitude in degrees
        lon (float): Longitude in degrees
        name (Optional[str]): Optional display name
        contraction_order (Optional[int]): Round in which the node was contracted
        depth (int): Hierarchy depth, set once on contraction
    """

    id: int
    lat: float
    lon: float
    name: Optional[str] = None
    contraction_order: Optional[int] = None
    depth: int = 0

    def __post_init__(self):
        """Validate node after initialization."""
        if not isinstance(self.id, int) or isinstance(self.id, bool):
            raise TypeError("id must be an integer")
        validate_coordinate("lat", self.lat, 90.0)
        validate_coordinate("lon", self.lon, 180.0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def is_contracted(self) -> bool:
        return self.contraction_order is not None

    def distance_to(self, other: "Node") -> float:
        """Great-circle distance to another node in meters."""
        return great_circle_distance(self.lat, self.lon, other.lat, other.lon)

    def set_contraction_order(self, order: int) -> None:
        """
        Mark this node as contracted in the given round.

        Raises:
            ContractionError: If the node is already contracted or the order is negative
        """
        if self.contraction_order is not None:
            raise ContractionError(
                f"Node {self.id} already contracted in round {self.contraction_order}"
            )
        if order < 0:
            raise ContractionError(f"Contraction order must be non-negative, got {order}")
        self.contraction_order = order


def compute_depth(neighbors: Iterable[Node]) -> int:
    """One more than the deepest uncontracted neighbor, or 0 without any."""
    depths = [n.depth for n in neighbors if not n.is_contracted]
    if not depths:
        return 0
    return 1 + max(depths)
