"""Liveness and readiness probes.

Usage
-----
Import health resources for route registration::

    from giteahook.api.health.resources import HealthResource, ReadyResource
"""
