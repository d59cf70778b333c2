"""
API package containing dependencies and versioned routes.

``deps`` builds the store, service and renderer from the handles stored
on ``app.state``.  Version subpackages such as ``v1`` expose a
top‑level ``router`` with their JSON endpoints.
"""
