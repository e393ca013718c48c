"""HTTP surface of the contact book (FastAPI app and entry point)."""
