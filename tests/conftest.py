from __future__ import annotations

import pytest

from pypilots.demo import sample_pilots
from pypilots.models.pilot import Pilot


@pytest.fixture
def pilots() -> list[Pilot]:
    return sample_pilots()
