import pytest

from config import DEFAULT_REFERENCE_STRING, SimulationConfig
from simulator import VirtualMemorySimulator, format_record

algorithms = ['FIFO', 'LRU', 'OPTIMAL', 'CLOCK']

# Textbook counts for the classic reference string
EXPECTED_FAULTS = {
    3: {'FIFO': 15, 'LRU': 12, 'OPTIMAL': 9, 'CLOCK': 14},
    4: {'FIFO': 10, 'LRU': 8, 'OPTIMAL': 8},
}


@pytest.mark.parametrize('frames, algorithm', [
    (frames, algorithm) for frames, counts in EXPECTED_FAULTS.items() for algorithm in counts
])
def test_small(frames, algorithm):
    config = SimulationConfig(frames, 8, DEFAULT_REFERENCE_STRING, algorithm)
    simulator = VirtualMemorySimulator(config, random_seed=1)
    stats = simulator.run()
    assert stats.page_faults == EXPECTED_FAULTS[frames][algorithm]
    assert stats.hits == len(DEFAULT_REFERENCE_STRING) - stats.page_faults


def test_small_verbose_output(capsys):
    simulator = VirtualMemorySimulator(SimulationConfig.default('LRU'), random_seed=1)
    simulator.run(verbose=True)
    out = capsys.readouterr().out
    assert "Running LRU algorithm with 4 frames on 20 references" in out
    assert "Page Faults: 8" in out
    assert format_record(simulator.trace[-1]) in out
