"""HTTP service (FastAPI) and command-line entry points."""
