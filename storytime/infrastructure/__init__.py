"""Infrastructure implementations."""
