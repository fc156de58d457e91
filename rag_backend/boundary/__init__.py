"""
Boundary layer for external system integrations.

Handles all interactions with external systems (vector index, embedding and
generation providers, session history store, article feeds).
Provides adapters and clients for infrastructure dependencies.
"""
