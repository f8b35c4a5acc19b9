"""Enumerations and programming constants for the mesocycle engine.

Volume and load constants cite the resistance-training literature they are
drawn from.
"""

from enum import IntEnum, auto


class Goal(IntEnum):
    """Primary adaptation focus of a mesocycle."""

    HYPERTROPHY = auto()
    STRENGTH = auto()


class SplitTemplate(IntEnum):
    """Weekly split patterns mapping training days to muscle groups."""

    FULL_BODY = auto()
    PUSH_PULL_LEGS = auto()
    UPPER_LOWER = auto()

    @property
    def default_days_per_week(self) -> int:
        """Training days per week used when a caller gives no explicit count."""
        return _TEMPLATE_DEFAULT_DAYS[self]


class MuscleGroup(IntEnum):
    """Trainable muscle groups.

    Declaration order is the ordinal used for deterministic tie-breaking
    during scheduling.
    """

    # Upper body
    CHEST = auto()
    UPPER_BACK = auto()  # mid-trap, rhomboids
    LATS = auto()
    TRAPS = auto()
    FRONT_DELTS = auto()
    LATERAL_DELTS = auto()
    REAR_DELTS = auto()
    BICEPS = auto()
    TRICEPS = auto()
    FOREARMS = auto()

    # Core
    ABS = auto()
    OBLIQUES = auto()
    LOWER_BACK = auto()

    # Lower body
    GLUTES = auto()
    QUADS = auto()
    HAMSTRINGS = auto()
    CALVES = auto()
    HIP_ADDUCTORS = auto()
    HIP_ABDUCTORS = auto()

    @property
    def is_upper_body(self) -> bool:
        return self <= MuscleGroup.FOREARMS

    @property
    def display_name(self) -> str:
        return self.name.replace("_", " ").title()


class MechanicalPattern(IntEnum):
    """Generalised movement arc of an exercise."""

    HORIZONTAL_PUSH = auto()
    HORIZONTAL_PULL = auto()
    VERTICAL_PUSH = auto()
    VERTICAL_PULL = auto()
    SQUAT = auto()
    HINGE = auto()
    CARRY = auto()
    CORE_ANTI_EXTENSION = auto()
    CORE_ANTI_ROTATION = auto()
    ISOLATION = auto()


class Equipment(IntEnum):
    """Coarse equipment taxonomy."""

    BARBELL = auto()
    DUMBBELL = auto()
    KETTLEBELL = auto()
    CABLE = auto()
    MACHINE = auto()
    SMITH_MACHINE = auto()
    BODYWEIGHT = auto()
    BAND = auto()
    OTHER = auto()


class Weekday(IntEnum):
    """ISO-8601 weekday, 0 = Monday."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


_TEMPLATE_DEFAULT_DAYS = {
    SplitTemplate.FULL_BODY: 3,
    SplitTemplate.PUSH_PULL_LEGS: 6,
    SplitTemplate.UPPER_LOWER: 4,
}


# ---------------------------------------------------------------------------
# Calendar bounds
# ---------------------------------------------------------------------------
MIN_DAYS_PER_WEEK = 1
MAX_DAYS_PER_WEEK = 7
MIN_MESOCYCLE_WEEKS = 1

# Seeds are unsigned 64-bit integers
MAX_SEED = 2**64 - 1

# Seed used when the caller supplies none
DEFAULT_SEED = 0x5EED_2025

# ---------------------------------------------------------------------------
# Frequency: Schoenfeld, Ogborn & Krieger (2016), Sports Med 46(11):1689-1697
# Training a muscle at least twice weekly outperforms once-weekly for growth.
# ---------------------------------------------------------------------------
MIN_WEEKLY_FREQUENCY = {
    Goal.HYPERTROPHY: 2,
    Goal.STRENGTH: 1,
}

# ---------------------------------------------------------------------------
# Rep ranges: Schoenfeld et al. (2017), J Strength Cond Res 31(12):3508-3523
# Comparable hypertrophy across 5-30 reps when sets approach failure.
# ---------------------------------------------------------------------------
REP_RANGE_BOUNDS = {
    Goal.HYPERTROPHY: (5, 30),
    Goal.STRENGTH: (1, 8),
}
PRESCRIBED_REP_RANGE = {
    Goal.HYPERTROPHY: (5, 30),
    Goal.STRENGTH: (3, 6),
}

# ---------------------------------------------------------------------------
# Weekly volume: Schoenfeld, Ogborn & Krieger (2017), J Sports Sci 35(11)
# ~10+ weekly sets per muscle for hypertrophy; one set added per week.
# ---------------------------------------------------------------------------
BASE_WEEKLY_SETS = {
    Goal.HYPERTROPHY: 10,
    Goal.STRENGTH: 8,
}
WEEKLY_SET_INCREMENT = 1

# Relative load step per week (linear overload)
LOAD_STEP_PER_WEEK = {
    Goal.HYPERTROPHY: 0.05,
    Goal.STRENGTH: 0.025,
}

# ---------------------------------------------------------------------------
# Deload: Bell et al. (2023), Sports Med Open 9:87
# Volume roughly halved, intensity reduced ~30% relative to the prior week.
# ---------------------------------------------------------------------------
DELOAD_LOAD_FRACTION = 0.7
DELOAD_VOLUME_FRACTION = 0.5

# Reps-in-reserve: start at 3, approach failure, back off to 4 on deload
STARTING_TARGET_RIR = 3
DELOAD_TARGET_RIR = 4
MAX_TARGET_RIR = 4
