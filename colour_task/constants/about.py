"""Static metadata describing ColourMatch."""

APP_NAME = "ColourMatch"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "ColourMatch runs a timed colour matching task. Each slide shows a school subject; "
    "the group picks one of the remaining colours and presses All Agree before the "
    "countdown runs out. Every click is logged and saved to a JSON file at the end."
)

HELP_TEXT = (
    "Click a colour tile to select it, then press All Agree (or the Right arrow key).\n"
    "When the countdown reaches zero the slide advances on its own; a selected colour "
    "is still recorded, otherwise the slide is left unanswered.\n\n"
    "Keys: S saves the click log now, L writes the click log to the application log."
)
