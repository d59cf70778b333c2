"""
Version 1 of the JSON API.

Breaking changes should be introduced in new version subpackages (e.g.
``v2``) to preserve backwards compatibility.
"""
