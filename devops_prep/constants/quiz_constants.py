"""Quiz, interview and application constants shared across UI and core layers."""

ALL_CATEGORIES: str = "all"
DEFAULT_QUESTION_COUNT: int = 5
QUESTION_COUNT_CHOICES: tuple[int, ...] = (5, 10, 15, 20)
MIN_MULTIPLE_CHOICE_OPTIONS: int = 2
DEFAULT_DRAFT_OPTION_SLOTS: int = 4

TICK_INTERVAL_SECONDS: float = 1.0
TIME_WARNING_WINDOW_SECONDS: int = 30

ALL_STATUSES: str = "all"
