from collections import deque
from enum import Enum

from errors import InvalidConfiguration, PolicyInvariantViolation


class Algorithm(str, Enum):
    FIFO = 'FIFO'
    LRU = 'LRU'
    OPTIMAL = 'OPTIMAL'
    CLOCK = 'CLOCK'

    def __str__(self):
        return self.value


_ALIASES = {
    'OPT': Algorithm.OPTIMAL,
    'SECOND-CHANCE': Algorithm.CLOCK,
}


def parse_algorithm(name):
    if isinstance(name, Algorithm):
        return name
    if not name:
        raise InvalidConfiguration("No replacement policy selected")
    key = str(name).strip().upper()
    if key in _ALIASES:
        return _ALIASES[key]
    try:
        return Algorithm(key)
    except ValueError:
        raise InvalidConfiguration(f"Unknown algorithm: {name}") from None


class ReplacementPolicy:
    """
    Chooses which occupied frame to free when physical memory is full.

    The simulator passed to choose_victim is only read, except by Clock,
    which clears reference bits as its hand sweeps past them.
    """

    algorithm = None

    def choose_victim(self, simulator):
        raise NotImplementedError

    def page_loaded(self, page_num, frame_num):
        pass

    def page_evicted(self, page_num, frame_num):
        pass


class FIFOPolicy(ReplacementPolicy):
    algorithm = Algorithm.FIFO

    def __init__(self):
        self.load_order = deque()

    def page_loaded(self, page_num, frame_num):
        self.load_order.append(page_num)

    def page_evicted(self, page_num, frame_num):
        if self.load_order and self.load_order[0] == page_num:
            self.load_order.popleft()
        elif page_num in self.load_order:
            self.load_order.remove(page_num)

    def choose_victim(self, simulator):
        # Drop entries for pages that have left memory since they were queued
        while self.load_order:
            entry = simulator.page_table.lookup(self.load_order[0])
            if entry.is_valid():
                return entry.frame
            self.load_order.popleft()
        raise PolicyInvariantViolation("FIFO queue is empty while memory is full")


class LRUPolicy(ReplacementPolicy):
    algorithm = Algorithm.LRU

    def choose_victim(self, simulator):
        lru_time = float('inf')
        victim_frame = None

        for frame_num, vpage_num in enumerate(simulator.physical_memory.frames):
            if vpage_num is None:
                continue
            entry = simulator.page_table.lookup(vpage_num)
            last_used = float('-inf') if entry.last_used is None else entry.last_used
            # Strict comparison keeps the lowest frame on ties
            if victim_frame is None or last_used < lru_time:
                lru_time = last_used
                victim_frame = frame_num

        if victim_frame is None:
            raise PolicyInvariantViolation("LRU found no resident page to evict")
        return victim_frame


class OptimalPolicy(ReplacementPolicy):
    algorithm = Algorithm.OPTIMAL

    def choose_victim(self, simulator):
        """
        Optimal algorithm: Replace the page that will be used furthest in the future
        (or never used again).
        """
        future = simulator.reference_string
        start = simulator.current_step + 1
        max_future_time = -1
        victim_frame = None

        for frame_num, vpage_num in enumerate(simulator.physical_memory.frames):
            if vpage_num is None:
                continue

            next_ref_time = float('inf')
            for idx in range(start, len(future)):
                if future[idx] == vpage_num:
                    next_ref_time = idx
                    break

            if next_ref_time > max_future_time:
                max_future_time = next_ref_time
                victim_frame = frame_num

        if victim_frame is None:
            raise PolicyInvariantViolation("Optimal found no resident page to evict")
        return victim_frame


class ClockPolicy(ReplacementPolicy):
    algorithm = Algorithm.CLOCK

    def __init__(self):
        self.hand = 0
        self.last_scan_length = 0

    def choose_victim(self, simulator):
        frames = simulator.physical_memory.frames
        num_frames = len(frames)
        # Every set bit is cleared on the first lap, so the second lap must claim
        for visited in range(1, 2 * num_frames + 1):
            frame_num = self.hand
            vpage_num = frames[frame_num]
            if vpage_num is None:
                return self._claim(frame_num, num_frames, visited)
            entry = simulator.page_table.lookup(vpage_num)
            if entry.reference == 0:
                return self._claim(frame_num, num_frames, visited)
            entry.reference = 0
            self.hand = (self.hand + 1) % num_frames
        raise PolicyInvariantViolation(
            f"Clock scan visited {2 * num_frames} frames without finding a victim")

    def _claim(self, frame_num, num_frames, visited):
        self.last_scan_length = visited
        self.hand = (frame_num + 1) % num_frames
        return frame_num


POLICIES = {
    Algorithm.FIFO: FIFOPolicy,
    Algorithm.LRU: LRUPolicy,
    Algorithm.OPTIMAL: OptimalPolicy,
    Algorithm.CLOCK: ClockPolicy,
}


def make_policy(name):
    return POLICIES[parse_algorithm(name)]()
