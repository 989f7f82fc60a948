"""Button debouncing: non-blocking delays, GPIO device mapping and a debounce state machine."""

__version__ = "0.1.0"
__all__ = ["debounce", "delay", "gpio"]