# population_history.py

from collections import deque
import matplotlib.pyplot as plt
import logger as log
import constants as C
from listeners import WorldListener

class PopulationHistory(WorldListener):
    """
    Collects statistics snapshots into a bounded ring buffer and generates a
    population chart after the simulation ends.
    """
    def __init__(self, max_length=C.STATS_HISTORY_MAX_LENGTH, sample_interval=C.STATS_HISTORY_SAMPLE_INTERVAL_SECONDS):
        self.max_length = max_length
        self.sample_interval = sample_interval
        self.data = deque(maxlen=max_length)
        self.last_sample_time = None
        log.log(f"PopulationHistory initialized. Keeping up to {max_length} points.")

    def on_statistics(self, snapshot):
        if self.last_sample_time is not None and snapshot['sim_time'] - self.last_sample_time < self.sample_interval:
            return
        self.record(snapshot)

    def on_reset(self):
        self.clear()

    def record(self, snapshot):
        """Appends one point. The oldest point falls off once the buffer is full."""
        self.data.append({
            'sim_time': snapshot['sim_time'],
            'plant_count': snapshot['plant_count'],
            'herbivore_count': snapshot['herbivore_count'],
            'carnivore_count': snapshot['carnivore_count'],
        })
        self.last_sample_time = snapshot['sim_time']

    def clear(self):
        self.data.clear()
        self.last_sample_time = None

    def has_data(self):
        return len(self.data) > 0

    def series(self):
        """Returns the buffered points as parallel lists, keyed like the snapshot."""
        return {
            'sim_time': [point['sim_time'] for point in self.data],
            'plant_count': [point['plant_count'] for point in self.data],
            'herbivore_count': [point['herbivore_count'] for point in self.data],
            'carnivore_count': [point['carnivore_count'] for point in self.data],
        }

    def generate_and_save_population_graph(self, file_path=C.CHART_FILE_PATH):
        """
        Uses matplotlib to generate and save a line graph of the population per species.
        Returns True if the file was written.
        """
        if not self.has_data():
            log.log("[PopulationHistory] No data collected, skipping plot generation.")
            return False

        log.log(f"[PopulationHistory] Generating population plot with {len(self.data)} data points...")
        series = self.series()

        fig, ax = plt.subplots(figsize=C.CHART_FIGURE_SIZE)
        ax.plot(series['sim_time'], series['plant_count'], label='Plants', color='tab:green')
        ax.plot(series['sim_time'], series['herbivore_count'], label='Herbivores', color='tab:blue')
        ax.plot(series['sim_time'], series['carnivore_count'], label='Carnivores', color='tab:red')

        ax.set_title('Population Over Time')
        ax.set_xlabel('Time (Simulation Seconds)')
        ax.set_ylabel('Living Creatures')
        ax.grid(True, which='both', linestyle='--', linewidth=0.5)
        ax.legend()

        fig.tight_layout()

        try:
            fig.savefig(file_path)
            log.log(f"[PopulationHistory] Population graph saved to {file_path}")
            return True
        except Exception as e:
            log.log(f"[PopulationHistory] ERROR: Could not save population graph. Reason: {e}")
            return False
        finally:
            plt.close(fig)
