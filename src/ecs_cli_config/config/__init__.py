"""Runtime settings and on-disk locations."""
