"""Customer notification administration API.

The package exposes nothing at import time; the FastAPI application lives in
the top-level ``main`` module.
"""
