"""
Process-level state.

The campaign snapshot itself lives in the coordinator; this module only
records when the process started, for the health endpoint.
"""
import time

STARTED_AT: float = time.monotonic()
