"""
tests.conftest

Shared fixtures for building diagrams compactly.

Responsibilities:
- Turn `(id, type)` pairs and `(from, to)` pairs into core `ProcessGraph` values.
- Provide a settings object for the test environment.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

import pytest

from bpm_reducer.core.models import Edge, Node, ProcessGraph
from bpm_reducer.settings import Settings

GraphFactory = Callable[[Iterable[tuple[str, str]], Iterable[tuple[str, str]]], ProcessGraph]


def _make_graph(
    nodes: Iterable[tuple[str, str]], edges: Iterable[tuple[str, str]]
) -> ProcessGraph:
    return ProcessGraph(
        nodes=[Node(id=node_id, name=f"step-{node_id}", type=node_type) for node_id, node_type in nodes],
        edges=[Edge(source=src, target=dst) for src, dst in edges],
    )


@pytest.fixture
def make_graph() -> GraphFactory:
    return _make_graph


@pytest.fixture
def settings() -> Settings:
    return Settings(env="test", log_json=False)
