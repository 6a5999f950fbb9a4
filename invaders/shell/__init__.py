"""
Presentation shell: tick scheduling, key bindings and the pygame loop.

The pygame-dependent modules (app, controls) are imported on demand so the
scheduler stays usable headless.
"""

from .scheduler import TickScheduler

__all__ = [
    'TickScheduler',
]
