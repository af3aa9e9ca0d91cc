"""
Airport data models
"""
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple


@dataclass
class Fix:
    """Represents a named fix near an airport"""
    name: str
    latitude: float
    longitude: float
    position: Tuple[float, float] = (0.0, 0.0)  # km east/north of the airport reference


@dataclass
class Airport:
    """Represents an airport and its published procedures"""
    icao: str
    name: str
    latitude: float
    longitude: float
    fixes: Dict[str, Fix] = field(default_factory=dict)
    sids: Dict[str, 'StandardRouteModel'] = field(default_factory=dict)
    stars: Dict[str, 'StandardRouteModel'] = field(default_factory=dict)

    @property
    def reference_position(self) -> Tuple[float, float]:
        """(latitude, longitude) every fix position is measured from"""
        return (self.latitude, self.longitude)

    def get_sid(self, icao: str) -> Optional['StandardRouteModel']:
        return self.sids.get(icao.upper())

    def get_star(self, icao: str) -> Optional['StandardRouteModel']:
        return self.stars.get(icao.upper())

    def get_procedure(self, icao: str) -> Optional['StandardRouteModel']:
        """Get a SID or STAR by identifier"""
        return self.get_sid(icao) or self.get_star(icao)
