#time_manager.py

import time
import numpy as np
import constants as C
import logger as log

class TimeManager:
    def __init__(self, clock=time.perf_counter, speed=C.DEFAULT_SIMULATION_SPEED, paused=False):
        self.clock = clock # Wall clock in seconds; injectable for deterministic tests
        self.total_sim_seconds = 0.0
        self.is_paused = paused
        self.current_multiplier = max(0.0, speed)
        self.last_update = self.clock()

    def consume_real_delta(self):
        """Returns the real seconds elapsed since the previous call, capped."""
        now = self.clock()
        real_delta_seconds = now - self.last_update
        self.last_update = now
        # Cap it to prevent a "spiral of death" if a frame takes too long.
        return min(max(0.0, real_delta_seconds), C.MAX_REAL_DELTA_SECONDS)

    def get_scaled_delta_time(self, real_delta_seconds):
        """Returns how much simulation time should pass based on real time and speed."""
        if self.is_paused:
            return 0.0
        return max(0.0, real_delta_seconds) * self.current_multiplier

    def next_delta(self):
        """Measures the wall clock and returns the scaled delta for the next tick."""
        real_delta_seconds = self.consume_real_delta()
        return self.get_scaled_delta_time(real_delta_seconds)

    def update_total_time(self, scaled_delta_time):
        """Advances the monotonic simulation clock."""
        self.total_sim_seconds += scaled_delta_time

    def pause(self):
        if not self.is_paused:
            self.is_paused = True
            log.log("Event: Simulation paused.")

    def resume(self):
        if self.is_paused:
            self.is_paused = False
            # Reset the baseline so the time spent paused is not replayed as one big step.
            self.last_update = self.clock()
            log.log("Event: Simulation resumed.")

    def toggle_pause(self):
        if self.is_paused:
            self.resume()
        else:
            self.pause()

    def set_speed(self, speed):
        """Sets the speed multiplier. Returns False if the value is rejected."""
        try:
            speed = float(speed)
        except (TypeError, ValueError):
            log.log(f"WARNING: Simulation speed needs a number, got {speed!r}. Speed unchanged.")
            return False
        if not np.isfinite(speed):
            log.log(f"WARNING: Simulation speed must be finite, got {speed}. Speed unchanged.")
            return False
        if speed < 0:
            log.log(f"WARNING: Negative simulation speed {speed} clamped to 0.")
            speed = 0.0
        self.current_multiplier = speed
        log.log(f"Event: Simulation speed set to x{self.current_multiplier}.")
        return True

    def set_speed_level(self, level):
        if level in C.TIME_MULTIPLIERS:
            self.set_speed(C.TIME_MULTIPLIERS[level])

    def reset(self):
        self.total_sim_seconds = 0.0
        self.last_update = self.clock()

    def get_display_string(self):
        minutes = int(self.total_sim_seconds // 60)
        seconds = int(self.total_sim_seconds % 60)

        time_str = f"Time: {minutes:02d}:{seconds:02d}"
        speed_str = f"Speed: x{self.current_multiplier:g}"
        if self.is_paused:
            speed_str = "Speed: PAUSED"

        return f"{time_str} | {speed_str}"
