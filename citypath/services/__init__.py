"""Services layer - Application orchestration.

This module contains the application services that orchestrate
the flow of data through adapters to fulfill use cases.

Available services:
- RoutePlannerService: Shortest-route queries over a loaded graph
"""

from .route_planner import RoutePlannerService, build_route_planner

__all__ = ["RoutePlannerService", "build_route_planner"]
