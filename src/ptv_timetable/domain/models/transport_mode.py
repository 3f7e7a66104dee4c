"""Transport mode and category enumerations."""

from enum import IntEnum, StrEnum


class TransportMode(IntEnum):
    """Route type codes used in request paths."""

    TRAIN = 0
    TRAM = 1
    BUS = 2
    VLINE = 3
    NIGHTBUS = 4

    # Aliases
    REGIONAL = 3
    NIGHT_BUS = 4

    @property
    def label(self) -> str:
        """Lower-case mode name as used by PTV (e.g. 'vline')."""
        return self.name.lower()

    @classmethod
    def parse(cls, value: "str | int") -> "TransportMode":
        """Parse a mode from its code or its name (case-insensitive, '-' or '_')."""
        if isinstance(value, int):
            return cls(value)
        text = value.strip()
        if text.isdigit():
            return cls(int(text))
        key = text.upper().replace("-", "_")
        if key not in cls.__members__:
            raise ValueError(f"Unknown transport mode: {value!r}")
        return cls.__members__[key]


class PointOfInterest(IntEnum):
    """Point of interest codes for map lookups."""

    TRAIN = 0
    TRAM = 1
    BUS = 2
    VLINE = 3
    NIGHTBUS = 4
    TICKET_OUTLET = 100


class DisruptionMode(StrEnum):
    """Disruption categories accepted by the disruptions endpoint."""

    GENERAL = "general"
    METRO_BUS = "metro-bus"
    METRO_TRAIN = "metro-train"
    METRO_TRAM = "metro-tram"
    REGIONAL_BUS = "regional-bus"
    REGIONAL_COACH = "regional-coach"
    REGIONAL_TRAIN = "regional-train"
