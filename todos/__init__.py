"""Todo service package: JSON file store, FastAPI routes and error handling."""
