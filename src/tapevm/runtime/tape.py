from tapevm.common.hwconf import CELL_MASK, INITIAL_TAPE_SIZE


class Tape:
    ''' Byte cells growing to the right on demand '''
    cells: bytearray

    def __init__(self, size: int = INITIAL_TAPE_SIZE):
        self.cells = bytearray(size)

    def __len__(self) -> int:
        return len(self.cells)

    def __getitem__(self, index: int) -> int:
        return self.cells[index]

    def __setitem__(self, index: int, value: int):
        self.cells[index] = value & CELL_MASK

    def ensure(self, index: int):
        missing = index + 1 - len(self.cells)

        if missing > 0:
            self.cells.extend(bytes(missing))

    def add(self, index: int, delta: int):
        self.cells[index] = (self.cells[index] + delta) & CELL_MASK

    def snapshot(self) -> bytes:
        return bytes(self.cells)
