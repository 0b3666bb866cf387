"""
API package containing versioned routes.

The ``v1`` subpackage exposes a ``router`` which the application
mounts under ``/api``.
"""
