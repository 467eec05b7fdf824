"""rovercli — command-line client for the rover-control API."""

__version__ = "1.0.0"
