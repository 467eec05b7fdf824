"""Infrastructure layer — HTTP access to the rover-control API."""
