import logging as lg

from tapevm.common.instructions import Program
from tapevm.compile.lexer import tokenize
from tapevm.compile.fold import fold
from tapevm.compile.link import link


class BuildSettings:
    fold: bool
    verbose: bool

    def __init__(self):
        self.fold = True
        self.verbose = False

    def update(
        self,
        fold: bool | None = None,
        verbose: bool | None = None
    ):
        if fold is not None:
            self.fold = fold

        if verbose is not None:
            self.verbose = verbose

        return self


def build_program(source: bytes | bytearray | str, settings: BuildSettings | None = None) -> Program:
    if settings is None:
        settings = BuildSettings()

    # First pass
    instructions = tokenize(source)
    lexed = len(instructions)

    if settings.fold:
        instructions = fold(instructions)

    # Second pass
    program = link(instructions)

    if settings.verbose:
        lg.info(f'Built {program.last} instructions from {lexed} operators')

    return program
