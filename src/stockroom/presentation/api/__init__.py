"""Stockroom HTTP API (FastAPI)."""
