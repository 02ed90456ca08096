from enum import Enum, IntEnum


class RelationshipStrength(IntEnum):
    NONE = 0
    WEAK = 1
    MEDIUM = 3
    STRONG = 9


class CorrelationType(IntEnum):
    STRONG_NEGATIVE = -2
    NEGATIVE = -1
    NONE = 0
    POSITIVE = 1
    STRONG_POSITIVE = 2


class LevelBand(str, Enum):
    """Ordinal band shared by implementation challenge and strategic importance."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"

    @property
    def rank(self) -> int:
        return _LEVEL_ORDER.index(self)


_LEVEL_ORDER = [LevelBand.LOW, LevelBand.MEDIUM, LevelBand.HIGH, LevelBand.CRITICAL]


class ImpactCategory(str, Enum):
    ISOLATED = "Isolated"
    SYNERGISTIC = "Synergistic"
    CONFLICTED = "Conflicted"
    COMPLEX = "Complex"


class InsightUrgency(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"
