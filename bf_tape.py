from bf_errors import AllocationError, BoundaryError, ConfigurationError

DEFAULT_TAPE_SIZE = 65536


class Tape:
    def __init__(self, size=DEFAULT_TAPE_SIZE):
        if size <= 0:
            raise ConfigurationError(f"Invalid size of {size}!")
        try:
            self.cells = bytearray(size)
        except (MemoryError, OverflowError):
            raise AllocationError(f"could not allocate a tape of {size} cells")
        self.ptr = 0

    def __len__(self):
        return len(self.cells)

    @property
    def cell(self):
        """Value of the cell under the cursor."""
        return self.cells[self.ptr]

    @cell.setter
    def cell(self, value):
        self.cells[self.ptr] = value % 256

    def move_right(self):
        if self.ptr + 1 >= len(self.cells):
            raise BoundaryError("stack underflow!")
        self.ptr += 1

    def move_left(self):
        if self.ptr == 0:
            raise BoundaryError("stack overflow!")
        self.ptr -= 1

    def increment(self):
        self.cells[self.ptr] = (self.cells[self.ptr] + 1) % 256

    def decrement(self):
        self.cells[self.ptr] = (self.cells[self.ptr] - 1) % 256

    def read_at(self, index):
        return self.cells[index]

    def write_at(self, index, value):
        self.cells[index] = value % 256

    def reset(self):
        # zero-fill in place; the cursor stays where the last program left it
        self.cells[:] = bytes(len(self.cells))
