from dataclasses import dataclass, replace
from typing import ClassVar, Iterator, Sequence

import tapevm.common.ops as ops


@dataclass(frozen=True)
class Instruction:
    op: ClassVar[int]

    def render(self) -> str:
        return ops.SYMBOLS[self.op]


@dataclass(frozen=True)
class Counted(Instruction):
    ''' Pointer move or cell arithmetic repeated `count` times '''
    count: int = 1

    def __post_init__(self):
        if self.count < 1:
            raise ValueError(f'{type(self).__name__} needs a positive count, got {self.count}')

    def render(self) -> str:
        return ops.SYMBOLS[self.op] * self.count

    def extend(self, count: int):
        return replace(self, count=self.count + count)


@dataclass(frozen=True)
class MoveRight(Counted):
    op = ops.MVR


@dataclass(frozen=True)
class MoveLeft(Counted):
    op = ops.MVL


@dataclass(frozen=True)
class Increment(Counted):
    op = ops.INC


@dataclass(frozen=True)
class Decrement(Counted):
    op = ops.DEC


@dataclass(frozen=True)
class Jump(Instruction):
    ''' Loop bracket; target is the index of the matching partner once linked '''
    target: int | None = None

    def resolve(self, target: int):
        return replace(self, target=target)


@dataclass(frozen=True)
class LoopOpen(Jump):
    op = ops.LOP


@dataclass(frozen=True)
class LoopClose(Jump):
    op = ops.LCL


@dataclass(frozen=True)
class Output(Instruction):
    op = ops.OUT


@dataclass(frozen=True)
class Input(Instruction):
    op = ops.INP


UNITS: dict[int, type[Instruction]] = {
    ops.MVR: MoveRight,
    ops.MVL: MoveLeft,
    ops.INC: Increment,
    ops.DEC: Decrement,
    ops.OUT: Output,
    ops.INP: Input,
    ops.LOP: LoopOpen,
    ops.LCL: LoopClose
}


def unit(op: int) -> Instruction:
    return UNITS[op]()


class Program:
    ''' Linked, read-only instruction sequence '''
    instructions: tuple[Instruction, ...]

    def __init__(self, instructions: Sequence[Instruction]):
        self.instructions = tuple(instructions)

    @property
    def last(self) -> int:
        return len(self.instructions)

    def __len__(self) -> int:
        return len(self.instructions)

    def __getitem__(self, index: int) -> Instruction:
        return self.instructions[index]

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self.instructions)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Program):
            return NotImplemented

        return self.instructions == other.instructions

    def __repr__(self) -> str:
        return f'Program({self.last} instructions)'

    def render(self) -> str:
        return ''.join(i.render() for i in self.instructions)
