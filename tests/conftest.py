"""
Pytest configuration for core library tests

In-memory explorer API and sample collection data for the field discovery
and asset query tests.
"""

import pytest

from atomic_offchain import ExplorerSettings
from tests.mocks import FakeExplorerApi


@pytest.fixture
def settings():
    """Explorer settings with the built-in defaults"""
    return ExplorerSettings(_env_file=None)


@pytest.fixture
def sample_explorer():
    """Collection 'sample' with schema S1 owning T1 and T2, and schema S2 owning T3"""
    return FakeExplorerApi(
        schemas={"sample": ["S1", "S2"]},
        templates={
            "S1": [
                {"template_id": "T1", "immutable_data": {"timestamp": "t", "name": "Card"}},
                {"template_id": "T2", "immutable_data": {"nation": "USA", "year": "2020"}},
            ],
            "S2": [
                {"template_id": 3, "immutable_data": {"name": "Plain"}},
            ],
        },
        assets=[{"asset_id": "1"}, {"asset_id": "2"}],
    )
