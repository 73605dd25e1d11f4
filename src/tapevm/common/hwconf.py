CELL_BITS = 8
CELL_MODULO = 1 << CELL_BITS
CELL_MASK = CELL_MODULO - 1

INITIAL_TAPE_SIZE = 1           # Tape starts as a single zero cell

PROGRAM_ENCODING = 'latin-1'    # One character per source byte
