"""HTTP routes of the local reference backend."""
