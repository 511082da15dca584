"""HTTP front-end (Flask)."""
