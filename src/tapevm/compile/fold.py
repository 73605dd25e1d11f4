''' Run-length folding of pointer moves and cell arithmetic '''

import logging as lg
from typing import Iterable

import tapevm.common.ops as ops
from tapevm.common.instructions import Instruction, Counted


def fold(instructions: Iterable[Instruction]) -> list[Instruction]:
    folded: list[Instruction] = []
    run: Counted | None = None

    for instruction in instructions:
        if isinstance(instruction, Counted) and instruction.op in ops.FOLDABLE:
            if run is not None and run.op == instruction.op:
                run = run.extend(instruction.count)
                folded[-1] = run
                continue

            run = instruction
            folded.append(run)
            continue

        # Brackets and I/O end the current run
        run = None
        folded.append(instruction)

    lg.debug(f'Folder: {len(folded)} instructions after folding')
    return folded
