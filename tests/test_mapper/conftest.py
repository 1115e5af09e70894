from __future__ import annotations

import pytest

from framesmith.host.memory import InMemoryHost
from framesmith.mapper import TreeMapper
from framesmith.model.diagnostic import DiagnosticLog
from framesmith.model.layout import Container
from framesmith.model.style import RuleTable


@pytest.fixture()
def host() -> InMemoryHost:
    return InMemoryHost()


@pytest.fixture()
def root(host) -> Container:
    return host.create_container()


@pytest.fixture()
def make_mapper(host):
    """Build a TreeMapper over *rules* with a fresh DiagnosticLog."""

    def factory(rules: dict | None = None) -> TreeMapper:
        return TreeMapper(host, RuleTable(rules or {}), diagnostics=DiagnosticLog())

    return factory
