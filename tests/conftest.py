# tests/conftest.py
from __future__ import annotations

import pytest
from loguru import logger

from helpers import mk_rules
from hypertime.core.ruleset import MappingRuleset


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield


@pytest.fixture
def stripes_rules() -> MappingRuleset:
    # {} -> a, depart 3, arrive 1
    return mk_rules(([], [("a", 3, 1)]))


@pytest.fixture
def preemption_rules() -> MappingRuleset:
    # {} -> a(5, 0); {a} -> b(2, 5)
    return mk_rules(([], [("a", 5, 0)]), (["a"], [("b", 2, 5)]))
