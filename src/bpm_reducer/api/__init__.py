"""
bpm_reducer.api

API package for the Process Diagram Reducer service.

Responsibilities:
- FastAPI app factory and router modules.
- Wire schemas, error responses, and dependency wiring.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The API layer should remain thin: request validation + delegation to services.
