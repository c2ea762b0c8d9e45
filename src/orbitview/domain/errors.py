# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Error types surfaced to the host.

Terminal orbit events (crash, escape) are modelled outcomes and are
returned as values, never raised. Numeric degeneracies are resolved
with epsilon branches inside the domain and never reach the caller.
"""


class OrbitViewError(Exception):
    """Base class for all orbitview errors."""


class InputValidationError(OrbitViewError, ValueError):
    """Malformed add/delete parameters. No state was changed."""


class ResourceLoadError(OrbitViewError, OSError):
    """An external resource (e.g. the globe texture) could not be loaded."""


class GeolocationError(OrbitViewError):
    """The reference location could not be determined."""
