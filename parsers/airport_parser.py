"""
Parser for airport JSON files
"""
import json
import logging
from typing import Dict, List, Optional
from models.airport import Airport
from models.standard_route import StandardRouteModel
from utils.fix_database import FixDatabase, parse_coordinate

logger = logging.getLogger(__name__)


class AirportParser:
    """Parser for airport JSON files containing fixes and SID/STAR definitions"""

    def __init__(self, airport_path: str):
        """Initialize the parser"""
        self.airport_path = airport_path
        self.airport: Optional[Airport] = None
        self.fix_database: Optional[FixDatabase] = None
        self._load_data()

    def _load_data(self):
        """Load and parse the airport file"""
        try:
            with open(self.airport_path, 'r') as f:
                data = json.load(f)

            self.airport = self._parse_airport(data)

            logger.info(f"Loaded {len(self.airport.sids)} SIDs and {len(self.airport.stars)} STARs for {self.airport.icao}")

        except Exception as e:
            logger.error(f"Error loading airport file {self.airport_path}: {e}")
            raise

    def _parse_airport(self, data: Dict) -> Airport:
        """Build the Airport from the top level JSON object"""
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object but got {type(data).__name__}")

        position = data.get('position', [0, 0])
        latitude = parse_coordinate(position[0]) if len(position) > 0 else None
        longitude = parse_coordinate(position[1]) if len(position) > 1 else None

        if latitude is None or longitude is None:
            raise ValueError(f"Invalid airport position: {position!r}")

        airport = Airport(
            icao=data.get('icao', '').upper(),
            name=data.get('name', ''),
            latitude=latitude,
            longitude=longitude
        )

        self.fix_database = FixDatabase(data.get('fixes', {}), airport.reference_position)
        airport.fixes = self.fix_database.get_all_fixes()
        airport.sids = self._parse_procedures(data.get('sids', {}))
        airport.stars = self._parse_procedures(data.get('stars', {}))

        return airport

    def _parse_procedures(self, procedures: Dict[str, Dict]) -> Dict[str, StandardRouteModel]:
        """Build a StandardRouteModel for each procedure definition"""
        parsed = {}

        for identifier, definition in procedures.items():
            definition = dict(definition)
            definition.setdefault('icao', identifier)

            parsed[identifier.upper()] = StandardRouteModel(definition, self.fix_database)
            logger.debug(f"Parsed procedure: {identifier}")

        return parsed

    def get_sid(self, icao: str) -> Optional[StandardRouteModel]:
        return self.airport.get_sid(icao)

    def get_star(self, icao: str) -> Optional[StandardRouteModel]:
        return self.airport.get_star(icao)

    def get_procedure(self, icao: str) -> Optional[StandardRouteModel]:
        """Get a SID or STAR by identifier"""
        return self.airport.get_procedure(icao)

    def get_procedure_names(self) -> List[str]:
        """Identifiers of every SID and STAR"""
        return sorted(list(self.airport.sids.keys()) + list(self.airport.stars.keys()))
