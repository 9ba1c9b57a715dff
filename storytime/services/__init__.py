"""Application services for the client and the local backend."""
