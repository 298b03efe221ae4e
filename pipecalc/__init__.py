"""Calculator workers and a monitor that communicate over named pipes."""

__version__ = "0.1.0"