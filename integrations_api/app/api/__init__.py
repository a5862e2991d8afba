"""
API package.

``router.py`` aggregates the per-resource routers under the
``/integrations`` prefix.  Handlers receive their service through the
dependencies defined in ``deps.py``.
"""
