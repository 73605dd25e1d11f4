import logging as lg
from typing import Sequence

from tapevm.common.instructions import Instruction, Jump, LoopOpen, LoopClose, Program


class MalformedProgram(Exception):
    def __init__(self, message: str, index: int):
        super().__init__(f'{message} at instruction {index}')
        self.index = index


def link(instructions: Sequence[Instruction]) -> Program:
    ''' Resolves every bracket to the index of its partner '''
    linked = list(instructions)
    opened: list[int] = []

    for index, instruction in enumerate(linked):
        if isinstance(instruction, LoopOpen):
            opened.append(index)

        elif isinstance(instruction, LoopClose):
            if not opened:
                raise MalformedProgram("Unmatched ']'", index)

            partner = opened.pop()
            linked[partner] = linked[partner].resolve(index)  # type: ignore
            linked[index] = instruction.resolve(partner)

    if opened:
        raise MalformedProgram("Unmatched '['", opened[-1])

    program = Program(linked)
    lg.debug(f'Linker: {program.last} instructions linked')
    return program


def jump_table(program: Program) -> dict[int, int]:
    table: dict[int, int] = {}

    for index, instruction in enumerate(program):
        if isinstance(instruction, Jump):
            if instruction.target is None:
                raise MalformedProgram('Unresolved bracket', index)

            table[index] = instruction.target

    return table
