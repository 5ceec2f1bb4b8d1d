"""
API package containing the HTTP routes.

``router.py`` aggregates the student‑facing and admin routers which
are mounted under ``/api`` by the application factory.
"""
