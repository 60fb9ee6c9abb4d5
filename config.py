import random

from errors import InvalidConfiguration
from policies import Algorithm, parse_algorithm

DEFAULT_FRAME_COUNT = 4
DEFAULT_VIRTUAL_PAGE_COUNT = 12
DEFAULT_REFERENCE_STRING = (7, 0, 1, 2, 0, 3, 0, 4, 2, 3, 0, 3, 2, 1, 2, 0, 1, 7, 0, 1)
DEFAULT_ALGORITHM = Algorithm.FIFO


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


class SimulationConfig:

    def __init__(self, physical_frame_count, virtual_page_count, reference_string, policy):
        self.physical_frame_count = physical_frame_count
        self.virtual_page_count = virtual_page_count
        self.reference_string = tuple(reference_string)
        self.policy = policy

    @classmethod
    def default(cls, policy=DEFAULT_ALGORITHM):
        return cls(DEFAULT_FRAME_COUNT, DEFAULT_VIRTUAL_PAGE_COUNT, DEFAULT_REFERENCE_STRING, policy)

    def validate(self):
        """
        Check every parameter and normalise the policy name.

        Raises InvalidConfiguration naming the first problem found; nothing
        is ever defaulted silently.
        """
        if not _is_int(self.physical_frame_count) or self.physical_frame_count <= 0:
            raise InvalidConfiguration(
                f"Frame count must be a positive integer, got {self.physical_frame_count!r}")
        if not _is_int(self.virtual_page_count) or self.virtual_page_count <= 0:
            raise InvalidConfiguration(
                f"Virtual page count must be a positive integer, got {self.virtual_page_count!r}")
        for page_num in self.reference_string:
            if not _is_int(page_num) or page_num < 0:
                raise InvalidConfiguration(f"Invalid page number in reference string: {page_num!r}")
        if self.reference_string and max(self.reference_string) >= self.virtual_page_count:
            raise InvalidConfiguration(
                f"Virtual page count {self.virtual_page_count} is too small for page "
                f"{max(self.reference_string)} in the reference string")
        self.policy = parse_algorithm(self.policy)
        return self

    def with_policy(self, policy):
        return SimulationConfig(self.physical_frame_count, self.virtual_page_count,
                                self.reference_string, policy)

    def __eq__(self, other):
        if not isinstance(other, SimulationConfig):
            return NotImplemented
        return (self.physical_frame_count, self.virtual_page_count, self.reference_string,
                str(self.policy).upper()) == (other.physical_frame_count, other.virtual_page_count,
                                               other.reference_string, str(other.policy).upper())

    def __repr__(self):
        return (f"SimulationConfig(frames={self.physical_frame_count}, "
                f"virtual_pages={self.virtual_page_count}, "
                f"references={len(self.reference_string)}, policy={self.policy})")


def parse_reference_string(text):
    references = []
    for item in text.split(','):
        item = item.strip()
        try:
            references.append(int(item))
        except ValueError:
            continue
    return references


def random_config(frame_count=DEFAULT_FRAME_COUNT, policy=DEFAULT_ALGORITHM, rng=None):
    if rng is None:
        rng = random.Random()
    length = rng.randint(10, 24)
    max_page = rng.randint(5, 14)
    references = [rng.randrange(max_page) for _ in range(length)]
    return SimulationConfig(frame_count, max_page + 5, references, policy)
