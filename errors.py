class SimulationError(Exception):
    pass


class InvalidConfiguration(SimulationError, ValueError):
    pass


class UnknownPage(SimulationError, LookupError):
    def __init__(self, page_num, num_pages):
        super().__init__(f"Page {page_num} is outside the virtual address space [0, {num_pages})")
        self.page_num = page_num
        self.num_pages = num_pages


class SimulationComplete(SimulationError):
    pass


class PolicyInvariantViolation(SimulationError, RuntimeError):
    pass
