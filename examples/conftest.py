"""pytest fixtures for the treeroute examples."""

import importlib.util
from pathlib import Path

import pytest


@pytest.fixture
def example_router(request: pytest.FixtureRequest):
    """The ``router`` defined in the example's own app.py.

    app.py is executed afresh for every test, so each test gets a router
    that is still unbuilt and open for registration.
    """
    app_file = Path(request.path).with_name("app.py")
    loader_spec = importlib.util.spec_from_file_location(
        f"treeroute_example_{app_file.parent.name}", app_file
    )
    assert loader_spec is not None and loader_spec.loader is not None
    module = importlib.util.module_from_spec(loader_spec)
    loader_spec.loader.exec_module(module)
    return module.router
