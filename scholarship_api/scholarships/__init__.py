"""
Scholarship records API package.

Exposes CRUD endpoints over a single in-memory collection of scholarship
records.  State lives in :mod:`.store` for the lifetime of the process; there
is no persistence across restarts.
"""

from .router import router  # noqa: F401
