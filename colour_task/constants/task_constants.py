"""Task-related constants shared across UI and core layers."""

PROMPT_LABELS: tuple[str, ...] = (
    "Mathematics",
    "English",
    "Science",
    "History",
    "Geography",
    "Art",
    "Music",
    "Physical Education",
)
OPTION_COUNT: int = 8
SLIDE_SECONDS: int = 15
TRANSITION_FEEDBACK_MS: int = 100
ANSWER_CORRECT_PROBABILITY: float = 0.5
FEEDBACK_CROSS_PROBABILITY: float = 0.75

OPTION_SATURATION: int = 78
OPTION_BRIGHTNESS: int = 90

CLICK_LOG_DIRECTORY: str = "click_logs"
AUTO_SAVE_FILENAME: str = "clickLog.json"
MANUAL_SAVE_FILENAME: str = "clickLog_manual.json"
