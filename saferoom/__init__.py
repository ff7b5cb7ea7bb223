"""
Smart Safe Room backend: root package.

This package contains the FastAPI app entry point (main.py), the API routes,
the room analysis use case, domain models, the safety signal heuristics and
the Azure Vision / Azure OpenAI clients.
"""
