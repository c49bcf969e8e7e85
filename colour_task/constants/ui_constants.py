"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "Colour Match Task"
WINDOW_MIN_WIDTH: int = 900
WINDOW_MIN_HEIGHT: int = 420
TICK_INTERVAL_MS: int = 20

START_TITLE: str = "COLOUR MATCH TASK"
START_HINT: str = "Press START to begin"
START_BUTTON: str = "START TASK"
ABOUT_BUTTON: str = "About"
LOAD_LOG_BUTTON: str = "Load click log"

ALL_AGREE_BUTTON: str = "All Agree — proceed"
SLIDE_COUNTER_TEMPLATE: str = "Slide: {current} / {total}"
TIME_LEFT_TEMPLATE: str = "Time left: {seconds}s"
USED_COLOURS_TEMPLATE: str = "Used colours: {used} / {total}"
FEEDBACK_CROSS: str = "✖"
FEEDBACK_TICK: str = "✔"

END_TITLE: str = "END OF TASK"
END_ANSWERED_TEMPLATE: str = "Questions answered: {answered}"
END_ACCURACY_TEMPLATE: str = "Accuracy: {percentage}%"
RESTART_BUTTON: str = "Restart Game"

SAVE_FAILED_TITLE: str = "Saving click log failed"
NOTHING_TO_SAVE_MESSAGE: str = "The click log is empty; nothing was saved."

LOAD_LOG_DIALOG_TITLE: str = "Open click log"
LOAD_LOG_FILE_FILTER: str = "Click logs (*.json);;All files (*)"
LOAD_FAILED_TITLE: str = "Loading click log failed"
LOADED_LOG_TITLE: str = "Click log loaded"
