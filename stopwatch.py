#stopwatch.py

import time
import constants as C

class Stopwatch:
    def __init__(self, clock=time.perf_counter):
        self.clock = clock
        self.start_time = None
        self.paused_at = None

    def start(self):
        """Starts (or restarts) the stopwatch from zero."""
        self.start_time = self.clock()
        self.paused_at = None

    def is_running(self):
        return self.start_time is not None

    def elapsed_seconds(self):
        """Returns seconds since start(), or 0.0 if never started."""
        if self.start_time is None:
            return 0.0
        now = self.paused_at if self.paused_at is not None else self.clock()
        return now - self.start_time

    def toggle_pause(self):
        if self.start_time is None:
            return
        if self.paused_at is None:
            self.paused_at = self.clock()
        else:
            # Shift the start so the paused interval is not counted.
            self.start_time += self.clock() - self.paused_at
            self.paused_at = None

    def get_display_string(self):
        total_ms = int(round(self.elapsed_seconds() * C.MILLISECONDS_PER_SECOND))
        seconds, ms = divmod(total_ms, 1000)
        time_str = f"+{seconds:02d}.{ms:03d} s"
        if self.paused_at is not None:
            time_str += " PAUSED"
        return time_str
