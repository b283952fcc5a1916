"""
bpm_reducer.services

Service-layer package.

Responsibilities:
- Wrap the pure reduction core with configuration and logging.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services should be pure Python and easily testable without an HTTP client.
