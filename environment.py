#environment.py

import numpy as np
import constants as C
import logger as log

class Environment:
    """Ambient, world-wide conditions. A single instance lives as long as its World."""
    def __init__(self, rng):
        self.rng = rng
        self.temperature = C.ENV_INITIAL_TEMPERATURE # Degrees Celsius
        self.rainfall = C.ENV_INITIAL_RAINFALL # mm per day
        self.light_level = C.ENV_INITIAL_LIGHT_LEVEL # Unitless [0.1, 1]
        self.pollution = C.ENV_INITIAL_POLLUTION # Unitless [0, 1]
        self.time_of_day = C.ENV_INITIAL_TIME_OF_DAY # Unitless [0, 1), 0.5 is noon
        self.day_duration = C.ENV_DAY_DURATION_SECONDS
        self.elapsed_seconds = 0.0 # Environment's own clock, used to expire events
        self.drought_ends_at = None # Sim time at which the active drought reverts, if any
        self.rainfall_before_drought = None # Restored when the drought ends
        log.log(f"Environment initialized. Temperature={self.temperature:.1f}, Rainfall={self.rainfall:.1f}, Light={self.light_level:.2f}")

    def update(self, delta_time):
        self.elapsed_seconds += delta_time

        self.time_of_day = (self.time_of_day + delta_time / self.day_duration) % 1.0
        # Simple sine wave over the day, never fully dark.
        self.light_level = max(C.ENV_MIN_LIGHT_LEVEL, float(np.sin(self.time_of_day * np.pi)))

        self.temperature += (self.rng.random() - 0.5) * C.ENV_TEMPERATURE_DRIFT_PER_SECOND * delta_time

        if self.drought_ends_at is not None and self.elapsed_seconds >= self.drought_ends_at:
            self._end_drought()

    def trigger_random_events(self, delta_time):
        """Rolls for random events. Their effects revert after a timed period."""
        if self.rng.random() < C.DROUGHT_PROBABILITY_PER_SECOND * delta_time:
            if self.drought_ends_at is None:
                self._start_drought()

    def _start_drought(self):
        duration = self.rng.uniform(0.0, C.DROUGHT_MAX_DURATION_SECONDS)
        self.rainfall_before_drought = self.rainfall
        self.rainfall *= C.DROUGHT_RAINFALL_FACTOR
        self.drought_ends_at = self.elapsed_seconds + duration
        log.log(f"Event: Drought started! Rainfall down to {self.rainfall:.1f} for {duration:.1f}s.")

    def _end_drought(self):
        self.rainfall = self.rainfall_before_drought
        self.rainfall_before_drought = None
        self.drought_ends_at = None
        log.log(f"Event: Drought ended. Rainfall restored to {self.rainfall:.1f}.")

    def is_drought_active(self):
        return self.drought_ends_at is not None

    def get_light_level(self):
        return self.light_level

    def get_temperature(self):
        return self.temperature

    def get_rainfall(self):
        return self.rainfall

    def get_pollution(self):
        return self.pollution

    def get_state(self):
        """A copy of all ambient values for statistics and UI consumers."""
        return {
            'temperature': self.temperature,
            'rainfall': self.rainfall,
            'light_level': self.light_level,
            'pollution': self.pollution,
            'time_of_day': self.time_of_day,
            'drought': self.is_drought_active(),
        }

    # --- External edits (control surface) ---
    def set_temperature(self, value):
        self.temperature = value

    def set_rainfall(self, value):
        self.rainfall = max(0.0, value)
        if self.is_drought_active():
            # An edit during a drought is what the drought reverts to.
            self.rainfall_before_drought = self.rainfall

    def set_pollution(self, value):
        self.pollution = max(C.ENV_POLLUTION_MIN, min(C.ENV_POLLUTION_MAX, value))

    def set_param(self, name, value):
        """Applies an external edit by parameter name. Returns False if the edit is rejected."""
        if name not in C.ENV_EDITABLE_PARAMS:
            log.log(f"WARNING: Unknown environment parameter '{name}'. Edit ignored.")
            return False
        try:
            value = float(value)
        except (TypeError, ValueError):
            log.log(f"WARNING: Environment parameter '{name}' needs a number, got {value!r}. Edit ignored.")
            return False
        if not np.isfinite(value):
            log.log(f"WARNING: Environment parameter '{name}' must be finite, got {value}. Edit ignored.")
            return False

        getattr(self, f"set_{name}")(value)
        log.log(f"Event: Environment parameter '{name}' set to {getattr(self, name):.2f}.")
        return True
