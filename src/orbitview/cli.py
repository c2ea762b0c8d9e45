# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for a headless orbit view session.

Usage:
    # Five demo satellites over Amsterdam, 120 frames at 60 fps
    orbitview --lat 52.37 --lon 4.90

    # Custom satellites: rate components U,V (rad/s), altitude (km), name
    orbitview --lat 0 --lon 0 --no-demo --add 0.2,0.1,300,Probe
    orbitview --lat 0 --lon 0 --orbit-type elliptical:400:Molniya

    # Delete the second satellite, write PNG frames and a JSON snapshot
    orbitview --lat 0 --lon 0 --delete 2 --output-dir frames/ --export-json state.json
"""
import argparse
import logging
import os
import sys
from datetime import datetime

from orbitview.adapters import (
    FixedLocation,
    FixedWallClock,
    ImageTexture,
    JsonConfigReader,
    JsonSnapshotWriter,
    PillowSurface,
    SteppedFrameClock,
    SystemWallClock,
    load_texture,
)
from orbitview.domain.animation import FrameLoop, ScheduleTicker
from orbitview.domain.config import DEFAULT_CONFIG, DEFAULT_SCHEDULE
from orbitview.domain.errors import InputValidationError, OrbitViewError
from orbitview.domain.globe import render_globe
from orbitview.domain.propagation import TerminalEvent
from orbitview.domain.requests import (
    parse_add_request,
    parse_delete_index,
    parse_orbit_type_request,
)
from orbitview.domain.satellite import radius_to_altitude_km
from orbitview.domain.simulation import Simulation
from orbitview.domain.views import build_views
from orbitview.ports.clock import WallClock
from orbitview.ports.rendering import TextureSampler

logger = logging.getLogger(__name__)


def parse_add_spec(text: str):
    """Parse 'U,V,ALT[,NAME]' into an AddSatelliteRequest."""
    parts = text.split(",", 3)
    if len(parts) < 3:
        raise InputValidationError(
            f"Invalid --add '{text}'. Expected U,V,ALT[,NAME]."
        )
    name = parts[3] if len(parts) == 4 else None
    return parse_add_request(parts[0], parts[1], parts[2], name)


def parse_orbit_type_spec(text: str):
    """Parse 'TYPE:ALT[:NAME]' into an OrbitTypeRequest."""
    parts = text.split(":", 2)
    if len(parts) < 2:
        raise InputValidationError(
            f"Invalid --orbit-type '{text}'. Expected TYPE:ALT[:NAME]."
        )
    name = parts[2] if len(parts) == 3 else None
    return parse_orbit_type_request(parts[0], parts[1], name)


def build_simulation(
    lat_deg: float,
    lon_deg: float,
    config_path: str | None = None,
    demo: bool = True,
    add_specs: list[str] | None = None,
    orbit_type_specs: list[str] | None = None,
    delete_indices: list[str] | None = None,
) -> Simulation:
    """
    Create a simulation and apply add/delete commands.

    Adds run before deletes, so 1-based delete indices refer to the list
    after every addition.
    """
    config, schedule = DEFAULT_CONFIG, DEFAULT_SCHEDULE
    if config_path:
        config, schedule = JsonConfigReader().read_config(config_path)

    lat_deg, lon_deg = FixedLocation(lat_deg, lon_deg).locate()
    if demo:
        simulation = Simulation.with_demo_satellites(lat_deg, lon_deg, config, schedule)
    else:
        simulation = Simulation(lat_deg, lon_deg, config, schedule)

    requests = [parse_add_spec(spec) for spec in add_specs or []]
    requests += [parse_orbit_type_spec(spec) for spec in orbit_type_specs or []]
    for request in requests:
        simulation.add_satellite(request)

    for index_text in delete_indices or []:
        index = parse_delete_index(index_text, simulation.satellite_count)
        simulation.remove_satellite_at(index)

    return simulation


def run_session(
    simulation: Simulation,
    frames: int,
    fps: float,
    texture: TextureSampler,
    output_dir: str | None = None,
) -> tuple[FrameLoop, list[TerminalEvent]]:
    """
    Animate the simulation for a number of frames on a stepped clock.

    Returns:
        The stopped frame loop and every terminal event it produced.
    """
    if frames < 1:
        raise ValueError(f"frames must be >= 1, got {frames}")

    views = build_views(simulation.lat_deg, simulation.lon_deg, simulation.orbital_basis)
    backgrounds = {
        view.name: render_globe(
            view.basis, view.width, view.height, view.earth_radius_px,
            texture, mark_center=view.primary,
        )
        for view in views
    }
    surfaces = {view.name: PillowSurface(view.width, view.height) for view in views}

    clock = SteppedFrameClock(fps)
    loop = FrameLoop(simulation, views, surfaces, clock, backgrounds=backgrounds)
    events: list[TerminalEvent] = []
    loop.start()
    for _ in range(frames):
        clock.advance()
        events.extend(loop.last_result.events)
    loop.stop()

    if output_dir:
        os.makedirs(output_dir, exist_ok=True)
        for name, surface in surfaces.items():
            path = os.path.join(output_dir, f"{name}.png")
            surface.save(path)
            logger.debug("Wrote %s", path)

    return loop, events


def format_satellite_lines(simulation: Simulation) -> list[str]:
    snapshot = simulation.snapshot()
    lines = []
    for index, sat in enumerate(snapshot.satellites, start=1):
        altitude = radius_to_altitude_km(sat.radius, simulation.config)
        lines.append(
            f"{index}. {sat.name} ({sat.color}) alt={altitude:.0f} km "
            f"speedU={sat.speed_u:.3f} speedV={sat.speed_v:.3f} "
            f"angularSpeed={sat.angular_speed:.3f} rad/s"
        )
    return lines


def main():
    parser = argparse.ArgumentParser(
        description="Simulate satellites around a normalized globe and schedule overflight gaps"
    )
    parser.add_argument('--lat', type=float, required=True, help="Reference latitude (deg)")
    parser.add_argument('--lon', type=float, required=True, help="Reference longitude (deg)")
    parser.add_argument(
        '--config',
        help="JSON config with optional 'simulation' and 'schedule' sections"
    )
    parser.add_argument('--verbose', '-v', action='store_true', help="Debug logging")

    sat_group = parser.add_argument_group('satellites')
    sat_group.add_argument(
        '--no-demo', action='store_true', default=False,
        help="Start without the five demo satellites"
    )
    sat_group.add_argument(
        '--add', action='append', default=[], metavar='U,V,ALT[,NAME]',
        help="Add a custom satellite from rate components (rad/s) and altitude (km)"
    )
    sat_group.add_argument(
        '--orbit-type', action='append', default=[], metavar='TYPE:ALT[:NAME]',
        help="Add a satellite from a profile: circular, elliptical, escape, suborbital"
    )
    sat_group.add_argument(
        '--delete', action='append', default=[], metavar='N',
        help="Delete the satellite at 1-based index N (applied after additions)"
    )

    anim_group = parser.add_argument_group('animation')
    anim_group.add_argument(
        '--frames', type=int, default=120,
        help="Number of frames to simulate (default: 120)"
    )
    anim_group.add_argument(
        '--fps', type=float, default=60.0,
        help="Frame rate of the stepped clock (default: 60)"
    )
    anim_group.add_argument(
        '--now',
        help="ISO-8601 time for the overflight schedule (default: current time)"
    )

    export_group = parser.add_argument_group('export')
    export_group.add_argument('--texture', help="Equirectangular globe image")
    export_group.add_argument('--output-dir', help="Write the last frame of each view as PNG")
    export_group.add_argument('--export-json', help="Write satellites and free intervals to JSON")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        wall_clock: WallClock = SystemWallClock()
        if args.now:
            wall_clock = FixedWallClock(datetime.fromisoformat(args.now))

        simulation = build_simulation(
            args.lat, args.lon,
            config_path=args.config,
            demo=not args.no_demo,
            add_specs=args.add,
            orbit_type_specs=args.orbit_type,
            delete_indices=args.delete,
        )
        texture = load_texture(args.texture) if args.texture else ImageTexture.graticule()

        _, events = run_session(
            simulation, args.frames, args.fps, texture, output_dir=args.output_dir,
        )
        for event in events:
            print(f"{event.name} {event.status.value} at r={event.radius:.3f}")

        print(f"Satellites ({simulation.satellite_count}):")
        for line in format_satellite_lines(simulation):
            print(f"  {line}")

        ticker = ScheduleTicker(simulation, wall_clock)
        intervals = ticker.refresh()
        print("Next free intervals:")
        for interval in intervals:
            print(
                f"  {interval.start.strftime('%H:%M:%S')} - "
                f"{interval.end.strftime('%H:%M:%S')} ({interval.duration_text})"
            )

        if args.output_dir:
            print(f"Wrote frames to {args.output_dir}")

        if args.export_json:
            count = JsonSnapshotWriter().write_snapshot(
                simulation.snapshot(), simulation.config, args.export_json,
                intervals=intervals, generated_at=ticker.updated_at,
            )
            print(f"Exported {count} satellites to {args.export_json}")

    except FileNotFoundError as e:
        print(f"Error: file not found: {e.filename}", file=sys.stderr)
        sys.exit(1)
    except (OrbitViewError, ValueError, KeyError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
