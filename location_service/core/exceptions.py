class DatabaseUnavailableError(RuntimeError):
    """Raised at startup when MongoDB cannot be reached."""
