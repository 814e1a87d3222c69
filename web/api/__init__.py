"""API views - thin layer between callers and services."""
