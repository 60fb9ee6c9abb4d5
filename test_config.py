import random

import pytest

from config import (DEFAULT_REFERENCE_STRING, SimulationConfig, parse_reference_string,
                    random_config)
from errors import InvalidConfiguration
from policies import Algorithm


def test_default_config():
    config = SimulationConfig.default().validate()
    assert config.physical_frame_count == 4
    assert config.virtual_page_count == 12
    assert config.reference_string == DEFAULT_REFERENCE_STRING
    assert config.policy is Algorithm.FIFO


def test_validate_normalises_policy():
    config = SimulationConfig(2, 4, [0, 3], 'optimal').validate()
    assert config.policy is Algorithm.OPTIMAL


def test_with_policy_copies():
    config = SimulationConfig.default()
    other = config.with_policy('CLOCK')
    assert other.policy == 'CLOCK'
    assert config.policy is Algorithm.FIFO
    assert other.reference_string == config.reference_string


def test_bool_is_not_a_frame_count():
    with pytest.raises(InvalidConfiguration):
        SimulationConfig(True, 4, [0], 'FIFO').validate()


def test_parse_reference_string():
    assert parse_reference_string("7, 0,1 ,2") == [7, 0, 1, 2]
    assert parse_reference_string("1,,x, 3") == [1, 3]
    assert parse_reference_string("") == []


def test_random_config_is_valid_and_seeded():
    config = random_config(frame_count=3, policy='LRU', rng=random.Random(9))
    config.validate()
    assert 10 <= len(config.reference_string) <= 24
    assert config.physical_frame_count == 3
    assert config.virtual_page_count > max(config.reference_string)
    assert config == random_config(frame_count=3, policy='LRU', rng=random.Random(9))
