"""
bpm_reducer.api.routers

HTTP route modules.
"""
