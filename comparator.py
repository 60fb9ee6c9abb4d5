import random

from config import SimulationConfig
from errors import InvalidConfiguration
from policies import Algorithm
from simulator import VirtualMemorySimulator

PATTERNS = ('random', 'locality', 'sequential')

# Probability that the locality cursor drifts instead of jumping
LOCALITY = 0.7


def run_all(reference_string, frame_count, algorithms=tuple(Algorithm), random_seed=0):
    """
    Run each algorithm to completion on its own simulator and return them
    keyed by algorithm name. Nothing is shared between the runs.
    """
    reference_string = tuple(reference_string)
    if not isinstance(frame_count, int) or frame_count <= 0:
        raise InvalidConfiguration(f"Frame count must be a positive integer, got {frame_count!r}")
    virtual_page_count = max(reference_string) + 1 if reference_string else 1

    simulators = {}
    for algorithm in algorithms:
        config = SimulationConfig(frame_count, virtual_page_count, reference_string, algorithm)
        simulator = VirtualMemorySimulator(config, random_seed=random_seed)
        simulator.run()
        simulators[str(simulator.algorithm)] = simulator
    return simulators


def compare(reference_string, frame_count):
    return {name: simulator.fault_count
            for name, simulator in run_all(reference_string, frame_count).items()}


def generate_reference_string(length, max_page, pattern='random', rng=None):
    if length < 0:
        raise ValueError(f"Length must be non-negative, got {length}")
    if max_page <= 0:
        raise ValueError(f"max_page must be positive, got {max_page}")
    if rng is None:
        rng = random.Random()

    if pattern == 'random':
        return [rng.randrange(max_page) for _ in range(length)]
    elif pattern == 'locality':
        ref_string = []
        current = rng.randrange(max_page)
        for _ in range(length):
            if rng.random() < LOCALITY:
                # Stay close to the current page
                current = max(0, min(max_page - 1, current + rng.choice((-1, 0, 1))))
            else:
                current = rng.randrange(max_page)
            ref_string.append(current)
        return ref_string
    elif pattern == 'sequential':
        return [i % max_page for i in range(length)]
    else:
        raise ValueError(f"Unknown pattern: {pattern}")


def print_comparison(results, title=None):
    if title:
        print(f"\n{title}:")
    print(f"{'Algorithm':<10} {'Page Faults':<15}")
    print("-" * 26)
    for algorithm, faults in results.items():
        print(f"{algorithm:<10} {faults:<15}")
