"""
ATC Command Console

Interactive entry point: type operator commands and see how they are
interpreted, or resolve SID/STAR routes for the loaded airport.
"""
import sys
import logging
from pathlib import Path
from typing import List, Optional

from models.command import CommandValidationError
from models.command_kind import SystemCommand
from models.standard_route import StandardRouteModel
from parsers.airport_parser import AirportParser
from parsers.command_parser import interpret
from utils.argument_validators import list_validated_commands
from utils.constants import AIRPORT_DATA_DIR, LOG_LEVEL

# Setup logging
logging.basicConfig(
    level=getattr(logging, str(LOG_LEVEL).upper(), logging.INFO),
    format='%(message)s'
)
logger = logging.getLogger(__name__)

ROUTE_COMMAND = ".route"
HELP_COMMAND = ".help"
EXIT_COMMANDS = ["quit", "exit"]


class CommandConsole:
    """Main console class"""

    def __init__(self, airport_data_dir: str = AIRPORT_DATA_DIR):
        self.airport_data_dir = Path(airport_data_dir)
        self.airport_parser: Optional[AirportParser] = None

    def run(self):
        """Main console loop"""
        print("=" * 60)
        print("ATC Command Console")
        print("=" * 60)
        print(f"Type '{HELP_COMMAND}' for commands, '{EXIT_COMMANDS[0]}' to leave.")
        print()

        while True:
            line = input("> ").strip()
            if line.lower() in EXIT_COMMANDS:
                break
            if not line:
                continue

            for output in self.handle_line(line):
                print(output)

    def handle_line(self, line: str) -> List[str]:
        """
        Handle one line of input

        Args:
            line: Operator input

        Returns:
            Lines to display
        """
        if line.lower() == HELP_COMMAND:
            return [f"Commands: {', '.join(list_validated_commands())}",
                    f"{ROUTE_COMMAND} <procedure> <entry|runway> <exit|runway>"]

        if line.lower().startswith(ROUTE_COMMAND):
            return self._handle_route(line.split()[1:])

        result = interpret(line)
        try:
            result.raise_for_errors()
        except CommandValidationError as e:
            return [f"ERROR: {error}" for error in e.errors]

        if result.command == SystemCommand.AIRPORT.value:
            return self.load_airport(result.args[0])

        if result.is_transmit:
            return [f"{result.callsign}: {name_and_args}" for name_and_args in result.args]

        return [f"{result.command}: {result.args}"]

    def load_airport(self, icao: str) -> List[str]:
        """Load <airport_data_dir>/<icao>.json"""
        airport_path = self.airport_data_dir / f"{icao.lower()}.json"

        if not airport_path.exists():
            return [f"ERROR: No airport file found at {airport_path}"]

        try:
            self.airport_parser = AirportParser(str(airport_path))
        except (OSError, ValueError) as e:
            logger.exception("Error loading airport")
            return [f"ERROR loading airport data: {e}"]

        airport = self.airport_parser.airport
        return [
            f"Loaded {airport.icao} {airport.name}",
            f"  {len(airport.fixes)} fixes, {len(airport.sids)} SIDs, {len(airport.stars)} STARs"
        ]

    def _handle_route(self, args: List[str]) -> List[str]:
        """Print the pre-spawn annotated waypoints of a procedure"""
        if not self.airport_parser:
            return ["ERROR: No airport loaded. Use 'airport <icao>' first."]

        if len(args) < 1 or len(args) > 3:
            return [f"Usage: {ROUTE_COMMAND} <procedure> <entry|runway> <exit|runway>"]

        procedure = self.airport_parser.get_procedure(args[0])
        if procedure is None:
            return [f"ERROR: Unknown procedure {args[0].upper()}"]

        entry = args[1] if len(args) > 1 else ""
        exit_name = args[2] if len(args) > 2 else ""

        return self._format_route(procedure, entry, exit_name)

    def _format_route(self, procedure: StandardRouteModel, entry: str, exit_name: str) -> List[str]:
        """Format each waypoint with its restrictions and leg distance"""
        waypoints = procedure.find_standard_waypoints_for_entry_and_exit(entry, exit_name, is_pre_spawn=True)
        if not waypoints:
            return [f"{procedure.icao}: no fixes for entry '{entry}' and exit '{exit_name}'"]

        lines = [f"{procedure.icao} {procedure.name} ({procedure.procedure_type.value if procedure.procedure_type else 'unknown'})"]
        total_distance = 0.0
        for waypoint in waypoints:
            restriction = waypoint.restriction or ""
            if waypoint.distance_from_previous is None:
                lines.append(f"  {waypoint.name:<6} {restriction:<12} ---")
                continue

            total_distance += waypoint.distance_from_previous
            lines.append(f"  {waypoint.name:<6} {restriction:<12} {waypoint.distance_from_previous:6.1f} nm from {waypoint.previous_waypoint_name}")

        lines.append(f"  Total: {total_distance:.1f} nm")
        return lines


def main():
    """Main entry point"""
    try:
        console = CommandConsole(sys.argv[1] if len(sys.argv) > 1 else AIRPORT_DATA_DIR)
        console.run()
    except (KeyboardInterrupt, EOFError):
        print("\n\nCancelled by user.")
        sys.exit(0)
    except Exception as e:
        print(f"\nUnexpected error: {e}")
        logger.exception("Unexpected error")
        sys.exit(1)


if __name__ == "__main__":
    main()
