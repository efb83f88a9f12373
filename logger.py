# logger.py

# This will hold a reference to the simulation's TimeManager instance.
_time_manager = None

def set_time_manager(tm):
    """Sets the global time manager for the logger to use."""
    global _time_manager
    _time_manager = tm

def format_sim_time(sim_seconds):
    minutes = int(sim_seconds // 60)
    seconds = sim_seconds % 60
    return f"{minutes:03d}:{seconds:05.2f}"

def log(message):
    """Prints a message with a simulation timestamp if available."""
    # Check if the time manager has been set and the simulation has started.
    if _time_manager and _time_manager.total_sim_seconds > 0:
        time_str = f"[t={format_sim_time(_time_manager.total_sim_seconds)}]"
        print(f"{time_str} {message}")
    else:
        # For messages logged before the first tick.
        print(f"[Sim Start] {message}")
