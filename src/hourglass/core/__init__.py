"""Timer core: time sources, durations and the countdown state machine."""
