import logging as lg

import tapevm.common.ops as ops
from tapevm.common.instructions import Instruction, Counted, Jump, Program
from tapevm.runtime.peripheral import InputSource, OutputSink
from tapevm.runtime.tape import Tape


class PointerUnderflow(Exception):
    def __init__(self, ip: int, dp: int, count: int):
        super().__init__(
            f'Data pointer {dp} moved left by {count} at instruction {ip}'
        )
        self.ip = ip
        self.dp = dp
        self.count = count


class CPU():
    ip: int     # Instruction pointer
    dp: int     # Data pointer
    steps: int  # Executed instructions

    def __init__(self, program: Program, source: InputSource, sink: OutputSink):
        self.program = program  # Linked, never modified
        self.source = source
        self.sink = sink

        self.tape = Tape()
        self.ip = 0
        self.dp = 0
        self.steps = 0

    # - Helpers - #

    def debug_dump(self):
        state = [f'{k}:{v:X}' for k, v in {
            'IP': self.ip,
            'DP': self.dp,
            'LEN': len(self.tape),
            'CELL': self.tape[self.dp],
            'STEPS': self.steps
        }.items()]

        lg.debug(' '.join(state))

    @property
    def halted(self) -> bool:
        return self.ip >= self.program.last

    def cell(self) -> int:
        return self.tape[self.dp]

    # - Operations - #

    def mvr(self, instruction: Counted):
        self.dp += instruction.count
        self.tape.ensure(self.dp)

    def mvl(self, instruction: Counted):
        if instruction.count > self.dp:
            raise PointerUnderflow(self.ip - 1, self.dp, instruction.count)

        self.dp -= instruction.count

    def inc(self, instruction: Counted):
        self.tape.add(self.dp, instruction.count)

    def dec(self, instruction: Counted):
        self.tape.add(self.dp, -instruction.count)

    def out(self, _: Instruction):
        self.sink.write_byte(self.cell())

    def inp(self, _: Instruction):
        value = self.source.read_byte()
        self.tape[self.dp] = 0 if value is None else value

    def lop(self, instruction: Jump):
        if self.cell() == 0:
            self.ip = instruction.target + 1  # type: ignore

    def lcl(self, instruction: Jump):
        if self.cell() != 0:
            self.ip = instruction.target + 1  # type: ignore

    HANDLERS = {
        ops.MVR: mvr,
        ops.MVL: mvl,
        ops.INC: inc,
        ops.DEC: dec,
        ops.OUT: out,
        ops.INP: inp,
        ops.LOP: lop,
        ops.LCL: lcl
    }

    # -- Implementation -- #

    def exec_next(self):
        instruction = self.program[self.ip]
        self.ip += 1
        handler = self.HANDLERS[instruction.op]
        handler(self, instruction)
        self.steps += 1

    def run(self):
        while not self.halted:
            self.exec_next()

        self.sink.flush()
        self.debug_dump()
