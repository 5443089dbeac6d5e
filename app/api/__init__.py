"""
API layer for the weather favorites application.

Exposes the login endpoints, the session-gated favorites view and form,
and the city suggestion endpoint.
"""
