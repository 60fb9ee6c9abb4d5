import random

from errors import UnknownPage


class PageTableEntry:
    def __init__(self, virtual_page_num, modified=0):
        self.virtual_page_num = virtual_page_num
        self.frame = None  # None means not in memory
        self.reference = 0
        self.modified = modified  # cosmetic dirty bit, never read by the engine
        self.last_used = None  # None means never accessed

    def is_valid(self):
        return self.frame is not None

    def __repr__(self):
        return (f"PageTableEntry(page={self.virtual_page_num}, frame={self.frame}, "
                f"ref={self.reference}, mod={self.modified}, last_used={self.last_used})")


class PageTable:
    def __init__(self, num_pages, rng=None):
        if rng is None:
            rng = random.Random()
        self.num_pages = num_pages
        # Roughly 30% of pages start out dirty
        self.entries = [PageTableEntry(i, modified=1 if rng.random() > 0.7 else 0)
                        for i in range(num_pages)]

    def lookup(self, virtual_page_num):
        if not 0 <= virtual_page_num < self.num_pages:
            raise UnknownPage(virtual_page_num, self.num_pages)
        return self.entries[virtual_page_num]

    def touch(self, virtual_page_num, step):
        entry = self.lookup(virtual_page_num)
        entry.reference = 1
        entry.last_used = step
        return entry

    def resident_pages(self):
        return {entry.virtual_page_num for entry in self.entries if entry.is_valid()}

    def snapshot(self):
        """
        Rows of (page, frame, resident, reference, modified, last_used) for
        every page, in page order.
        """
        return [(e.virtual_page_num, e.frame, e.is_valid(), e.reference, e.modified, e.last_used)
                for e in self.entries]

    def __len__(self):
        return self.num_pages

    def __iter__(self):
        return iter(self.entries)
