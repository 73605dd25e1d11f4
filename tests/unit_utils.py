from pathlib import Path

from tapevm.compile.asm import BuildSettings, build_program
from tapevm.runtime.peripheral import BufferInput, BufferOutput
import tapevm.runtime.cpu as cpu


HELLO = '++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>+[<]<-]>>.>---.+++++++..+++.'


def find_file(filename: str) -> Path:
    return Path(__file__).parent / filename


def load_file(filename: str) -> str:
    return find_file(filename).read_text()


def load_bytes(filename: str) -> bytes:
    return find_file(filename).read_bytes()


def make_cpu(source: bytes | str, data: bytes = b'', fold: bool = True) -> cpu.CPU:
    settings = BuildSettings().update(fold=fold)
    program = build_program(source, settings)
    return cpu.CPU(program, BufferInput(data), BufferOutput())


def run_source(source: bytes | str, data: bytes = b'', fold: bool = True) -> cpu.CPU:
    proc = make_cpu(source, data, fold)
    proc.run()
    return proc


def output_of(proc: cpu.CPU) -> bytes:
    return proc.sink.getvalue()  # type: ignore
