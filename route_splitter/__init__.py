"""Route Splitter - Reduce dense hiking tracks to a few marker segments.

Modules:
    core: Projection, Douglas-Peucker simplification and the splitter
    model: Data structures (GeoPoint, RouteSegment, Route)
    cli: JSON file front end (python -m route_splitter)

Example:
    from route_splitter.core import Projector, RouteSplitter, SplitConfig
    from route_splitter.model import Route

    splitter = RouteSplitter(projector=Projector())
    result = splitter.split(route=Route.from_points(name="Trail", points=points))
"""
