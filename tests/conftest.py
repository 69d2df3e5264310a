"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
from routesitemap.core.routes import RouteNode


@pytest.fixture
def route_tree() -> RouteNode:
    """Route tree with a relative nested dynamic route."""
    return RouteNode(
        path="/",
        children=(
            RouteNode(path="about"),
            RouteNode(
                path="child/:id",
                children=(RouteNode(path="grand-child"),),
            ),
        ),
    )


@pytest.fixture
def route_configuration() -> list[dict[str, object]]:
    """Route configuration array with a pathless layout root."""
    return [
        {
            "routes": [
                {"path": "/", "exact": True},
                {"path": "/auth"},
                {
                    "path": "/child/:id",
                    "routes": [{"path": "/child/:id/grand-child"}],
                },
            ],
        },
    ]


@pytest.fixture
def routes_file(tmp_path: Path, route_configuration: list[dict[str, object]]) -> Path:
    """Write the route configuration to a JSON file."""
    path = tmp_path / "routes.json"
    path.write_text(json.dumps(route_configuration))
    return path
