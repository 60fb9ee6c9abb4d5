class PhysicalMemory:
    def __init__(self, num_frames=4):
        self.num_frames = num_frames
        # Each frame stores a virtual page number or None if free
        self.frames = [None] * num_frames

    def find_free_frame(self):
        for i, frame in enumerate(self.frames):
            if frame is None:
                return i
        return None

    def allocate_frame(self, frame_num, virtual_page_num):
        self.frames[frame_num] = virtual_page_num

    def free_frame(self, frame_num):
        self.frames[frame_num] = None

    def get_frame_info(self, frame_num):
        return self.frames[frame_num]

    def is_full(self):
        return self.find_free_frame() is None

    def occupied_count(self):
        return sum(1 for frame in self.frames if frame is not None)

    def resident_pages(self):
        return {frame for frame in self.frames if frame is not None}

    def snapshot(self):
        return tuple(self.frames)


class Statistics:
    def __init__(self):
        self.page_faults = 0
        self.hits = 0
        # Cumulative fault count after each processed reference
        self.faults_history = []

    def record_page_fault(self):
        self.page_faults += 1
        self.faults_history.append(self.page_faults)

    def record_hit(self):
        self.hits += 1
        self.faults_history.append(self.page_faults)

    @property
    def total_references(self):
        return self.page_faults + self.hits

    @property
    def hit_ratio(self):
        total = self.total_references
        return self.hits / total if total else 0.0

    def __str__(self):
        return (f"Page Faults: {self.page_faults}\n"
                f"Hits: {self.hits}\n"
                f"Hit Ratio: {self.hit_ratio * 100:.1f}%")
