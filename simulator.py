from collections import namedtuple
import random

from config import SimulationConfig
from errors import PolicyInvariantViolation, SimulationComplete
from memory_manager import PhysicalMemory, Statistics
from page_table import PageTable
from policies import make_policy

IDLE = 'IDLE'
RUNNING = 'RUNNING'
COMPLETE = 'COMPLETE'

# frame is where the page lives after the step; evicted is the page that was
# replaced to make room, or None; frames is the frame store after the step
StepRecord = namedtuple('StepRecord', ['step', 'page', 'was_fault', 'frame', 'evicted', 'frames'])


class VirtualMemorySimulator:

    def __init__(self, config=None, random_seed=None, rng=None):
        self.config = None
        self.reset(config if config is not None else SimulationConfig.default(),
                   random_seed=random_seed, rng=rng)

    def reset(self, config=None, random_seed=None, rng=None):
        if config is None:
            config = self.config
        # Validate before touching any state so a bad config leaves the old run intact
        config.validate()

        if rng is None:
            rng = random.Random(random_seed)

        self.config = config
        self.algorithm = config.policy
        self.reference_string = config.reference_string
        self.page_table = PageTable(config.virtual_page_count, rng=rng)
        self.physical_memory = PhysicalMemory(num_frames=config.physical_frame_count)
        self.policy = make_policy(config.policy)
        self.stats = Statistics()
        self.trace = []
        self.current_step = 0

    # Properties derived from counters rather than stored

    @property
    def state(self):
        if self.current_step >= len(self.reference_string):
            return COMPLETE
        if self.current_step == 0:
            return IDLE
        return RUNNING

    def is_complete(self):
        return self.state == COMPLETE

    @property
    def fault_count(self):
        return self.stats.page_faults

    @property
    def hit_count(self):
        return self.stats.hits

    @property
    def faults_history(self):
        return self.stats.faults_history

    @property
    def hit_ratio(self):
        return self.stats.hits / self.current_step if self.current_step else 0.0

    @property
    def memory_utilization(self):
        return self.physical_memory.occupied_count() / self.physical_memory.num_frames

    def get_page_table(self):
        return self.page_table.snapshot()

    # Frame store / page table bookkeeping

    def assign(self, page_num, frame_num):
        entry = self.page_table.lookup(page_num)
        occupant = self.physical_memory.get_frame_info(frame_num)
        if occupant is not None:
            raise PolicyInvariantViolation(
                f"Cannot load page {page_num} into frame {frame_num}: still holds page {occupant}")
        if entry.is_valid():
            raise PolicyInvariantViolation(f"Page {page_num} is already in frame {entry.frame}")

        self.physical_memory.allocate_frame(frame_num, page_num)
        entry.frame = frame_num
        entry.reference = 1
        self.policy.page_loaded(page_num, frame_num)

    def evict(self, frame_num):
        vpage_num = self.physical_memory.get_frame_info(frame_num)
        if vpage_num is None:
            raise PolicyInvariantViolation(f"Cannot evict empty frame {frame_num}")
        entry = self.page_table.lookup(vpage_num)

        # Clear the page table entry
        entry.frame = None
        self.physical_memory.free_frame(frame_num)
        self.policy.page_evicted(vpage_num, frame_num)
        return vpage_num

    # Fault handling

    def handle_page_fault(self, page_num):
        evicted = None
        frame_num = self.physical_memory.find_free_frame()

        if frame_num is None:
            frame_num = self.select_victim_frame()
            evicted = self.evict(frame_num)

        self.assign(page_num, frame_num)
        return frame_num, evicted

    def select_victim_frame(self):
        frame_num = self.policy.choose_victim(self)
        if not isinstance(frame_num, int) or not 0 <= frame_num < self.physical_memory.num_frames:
            raise PolicyInvariantViolation(
                f"{self.algorithm} returned frame {frame_num!r}, outside [0, {self.physical_memory.num_frames})")
        if self.physical_memory.get_frame_info(frame_num) is None:
            raise PolicyInvariantViolation(f"{self.algorithm} chose empty frame {frame_num} as a victim")
        return frame_num

    def step(self):
        if self.current_step >= len(self.reference_string):
            raise SimulationComplete(
                f"All {len(self.reference_string)} references have been processed")

        page_num = self.reference_string[self.current_step]
        # Unknown pages are rejected here, before any state changes
        entry = self.page_table.lookup(page_num)

        if entry.is_valid():
            frame_num, evicted = entry.frame, None
            was_fault = False
        else:
            frame_num, evicted = self.handle_page_fault(page_num)
            was_fault = True

        self.page_table.touch(page_num, self.current_step)
        if was_fault:
            self.stats.record_page_fault()
        else:
            self.stats.record_hit()

        record = StepRecord(self.current_step, page_num, was_fault, frame_num, evicted,
                            self.physical_memory.snapshot())
        self.trace.append(record)
        self.current_step += 1
        return record

    def steps(self):
        """
        Yield one StepRecord per remaining reference. Stopping iteration
        early cancels the run between two steps.
        """
        while not self.is_complete():
            yield self.step()

    def run(self, should_stop=None, verbose=False):
        if verbose:
            print(f"\n{'='*60}")
            print(f"Running {self.algorithm} algorithm with {self.physical_memory.num_frames} frames "
                  f"on {len(self.reference_string)} references")
            print(f"{'='*60}")

        while not self.is_complete():
            if should_stop is not None and should_stop(self):
                break
            record = self.step()
            if verbose:
                print(format_record(record))

        if verbose:
            print(f"\nResults:")
            print(self.stats)
            print(f"{'='*60}\n")

        return self.stats

    def summary(self):
        return (f"Total Page Faults: {self.fault_count}\n"
                f"Hit Ratio: {self.hit_ratio * 100:.1f}%\n"
                f"Memory Utilization: {self.memory_utilization * 100:.1f}%")


def format_record(record):
    frames = ' '.join('-' if page is None else str(page) for page in record.frames)
    if not record.was_fault:
        outcome = 'HIT '
    elif record.evicted is None:
        outcome = 'MISS'
    else:
        outcome = f'MISS (evict {record.evicted})'
    return f"{record.step:>4}  page {record.page:<4} {outcome:<16} [{frames}]"
