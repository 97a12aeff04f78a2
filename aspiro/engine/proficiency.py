"""
Proficiency scale and the enumerations shared by the scorers.

Rank drives gap detection, weight drives match-score contribution. Both grow
with proficiency.
"""
import enum
from typing import Optional, Union

# Weight given to a held skill whose level is not on the scale
UNRATED_WEIGHT = 0.2


class ProficiencyLevel(str, enum.Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @property
    def weight(self) -> float:
        return _WEIGHTS[self]

    @classmethod
    def parse(cls, value: Union["ProficiencyLevel", str, None]) -> Optional["ProficiencyLevel"]:
        """Case-insensitive lookup; None for blanks and unknown labels."""
        if value is None:
            return None
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        for level in cls:
            if level.value.lower() == normalized:
                return level
        return None


_RANKS = {
    ProficiencyLevel.BEGINNER: 1,
    ProficiencyLevel.INTERMEDIATE: 2,
    ProficiencyLevel.ADVANCED: 3,
}

_WEIGHTS = {
    ProficiencyLevel.BEGINNER: 0.4,
    ProficiencyLevel.INTERMEDIATE: 0.7,
    ProficiencyLevel.ADVANCED: 1.0,
}


def _is_blank(level: Union[ProficiencyLevel, str, None]) -> bool:
    return level is None or (isinstance(level, str) and not level.strip())


def proficiency_rank(level: Union[ProficiencyLevel, str, None]) -> int:
    """
    Ordinal rank used for gap detection.

    A holding with no recorded level counts as Beginner; an unrecognised
    label ranks 0, below every requirement.
    """
    if _is_blank(level):
        return ProficiencyLevel.BEGINNER.rank
    parsed = ProficiencyLevel.parse(level)
    return parsed.rank if parsed else 0


def proficiency_weight(level: Union[ProficiencyLevel, str, None]) -> float:
    """Match-score weight of a held skill; blanks weigh as Beginner, unknown labels UNRATED_WEIGHT."""
    if _is_blank(level):
        return ProficiencyLevel.BEGINNER.weight
    parsed = ProficiencyLevel.parse(level)
    return parsed.weight if parsed else UNRATED_WEIGHT


def recorded_label(level: Union[ProficiencyLevel, str, None]) -> str:
    """The level as reported back to the user: canonical when known, Beginner when blank."""
    if _is_blank(level):
        return ProficiencyLevel.BEGINNER.value
    parsed = ProficiencyLevel.parse(level)
    return parsed.value if parsed else str(level).strip()


class GrowthOutlook(str, enum.Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class GapSeverity(str, enum.Enum):
    CRITICAL = "Critical"
    IMPORTANT = "Important"
    NICE_TO_HAVE = "Nice to Have"

    @property
    def order(self) -> int:
        return _SEVERITY_ORDER[self]


_SEVERITY_ORDER = {
    GapSeverity.CRITICAL: 0,
    GapSeverity.IMPORTANT: 1,
    GapSeverity.NICE_TO_HAVE: 2,
}


class FeedbackCategory(str, enum.Enum):
    CONTENT = "Content"
    FORMATTING = "Formatting"
    KEYWORDS = "Keywords"
    ACHIEVEMENTS = "Achievements"


class FeedbackPriority(str, enum.Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @property
    def order(self) -> int:
        return _PRIORITY_ORDER[self]


_PRIORITY_ORDER = {
    FeedbackPriority.HIGH: 0,
    FeedbackPriority.MEDIUM: 1,
    FeedbackPriority.LOW: 2,
}
