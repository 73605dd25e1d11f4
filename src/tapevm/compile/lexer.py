import logging as lg

import tapevm.compile.grammar as grammar
from tapevm.common.hwconf import PROGRAM_ENCODING
from tapevm.common.instructions import Instruction, unit


def decode(source: bytes | bytearray | str) -> str:
    if isinstance(source, str):
        return source

    return bytes(source).decode(PROGRAM_ENCODING)


def tokenize(source: bytes | bytearray | str) -> list[Instruction]:
    text = decode(source)
    codes = grammar.program.parse_string(text, parse_all=True)
    instructions = [unit(op) for op in codes]
    lg.debug(f'Lexer: {len(text)} source characters, {len(instructions)} instructions')
    return instructions
