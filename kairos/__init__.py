"""Timing utilities: durations, stopwatches, timers, timesteps, FPS counting and event playback."""

__version__ = "1.0.0"