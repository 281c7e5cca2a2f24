import os

import pytest

from .fixtures import *


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    # live-node tests only run when an RPC endpoint is given
    if os.environ.get("BYZOP_RPC_URL"):
        return
    skip_live = pytest.mark.skip(reason="BYZOP_RPC_URL not set")
    for item in items:
        if item.get_closest_marker("blockchain"):
            item.add_marker(skip_live)
