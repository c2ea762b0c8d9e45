"""
Orbit View

Simulate satellites around a normalized spherical body, render their
trajectories over a textured globe from three cameras anchored at a
reference location, and predict the free time intervals between
consecutive overflights of that location.
"""

from orbitview.domain.config import (
    DEFAULT_CONFIG,
    DEFAULT_SCHEDULE,
    ScheduleConfig,
    SimulationConfig,
)
from orbitview.domain.errors import (
    GeolocationError,
    InputValidationError,
    OrbitViewError,
    ResourceLoadError,
)
from orbitview.domain.geodetic_frame import (
    GeodeticBasis,
    geodetic_basis,
    unit_vector_to_geodetic,
)
from orbitview.domain.satellite import (
    ConicElements,
    OrbitPolicy,
    OrbitStatus,
    Satellite,
    circular_satellite,
    custom_satellite,
    demo_satellites,
    derive_conic_elements,
)
from orbitview.domain.propagation import (
    TerminalEvent,
    advance_satellite,
    propagate,
)
from orbitview.domain.trajectory import (
    circular_path,
    conic_arcs,
    satellite_position,
    trajectory_arcs,
)
from orbitview.domain.projection import (
    ProjectedPoints,
    is_visible,
    project_points,
    to_screen,
)
from orbitview.domain.overflight import (
    FreeInterval,
    compute_free_intervals,
    compute_overflights,
    format_duration,
    next_crossings,
)
from orbitview.domain.requests import (
    AddSatelliteRequest,
    OrbitType,
    OrbitTypeRequest,
    parse_add_request,
    parse_delete_index,
    parse_orbit_type_request,
)
from orbitview.domain.simulation import Simulation, SimulationSnapshot
from orbitview.domain.views import ViewConfig, ViewMode, build_views, make_view
from orbitview.domain.rendering import render_view, satellite_legend
from orbitview.domain.globe import globe_texture_coordinates, render_globe
from orbitview.domain.animation import FrameLoop, FrameResult, ScheduleTicker

__version__ = "0.1.0"
