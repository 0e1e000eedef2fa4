# logger.py

import constants as C

# This will hold a reference to the running Stopwatch instance.
_stopwatch = None

def set_stopwatch(sw):
    """Sets the global stopwatch for the logger to use."""
    global _stopwatch
    _stopwatch = sw

def log(message):
    """Prints a message with an elapsed-time stamp if available."""
    if _stopwatch and _stopwatch.is_running():
        print(f"[{_stopwatch.get_display_string()}] {message}")
    else:
        # For messages logged before a stopwatch is running.
        print(f"[Start] {message}")

def debug(message):
    """Logs a DEBUG message, only when C.LOG_DEBUG is enabled."""
    if C.LOG_DEBUG:
        log(f"DEBUG: {message}")
