import sys
from pathlib import Path
import logging as lg
import traceback

import click

from tapevm.compile.asm import BuildSettings, build_program
from tapevm.compile.link import MalformedProgram
from tapevm.runtime.peripheral import (
    InputSource, OutputSink, BufferInput, BufferOutput, StdinInput, StdoutOutput
)
import tapevm.runtime.cpu as cpu


EXIT_HALT = 0
EXIT_MALFORMED = 2
EXIT_UNDERFLOW = 3
EXIT_KEYBOARD = 4
EXIT_EXEC_ERROR = 100

PROGRAMS_DIR = Path(__file__).parent.parent / 'programs'


def load_bundled(name: str = 'hello.bf') -> bytes:
    return (PROGRAMS_DIR / name).read_bytes()


def execute(
    source: bytes | str,
    settings: BuildSettings | None = None,
    inp: InputSource | None = None,
    out: OutputSink | None = None
) -> cpu.CPU:
    program = build_program(source, settings)

    proc = cpu.CPU(
        program,
        StdinInput() if inp is None else inp,
        StdoutOutput() if out is None else out
    )

    try:
        proc.run()
    except cpu.PointerUnderflow:
        proc.debug_dump()
        raise

    return proc


def execute_buffered(
    source: bytes | str, data: bytes = b'', settings: BuildSettings | None = None
) -> bytes:
    out = BufferOutput()
    execute(source, settings, BufferInput(data), out)
    return out.getvalue()


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('--no-fold', is_flag=True, help='Runs the program without folding repeats')
def run(verbose: bool, no_fold: bool):
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO)
    lg.info('TAPEVM')

    settings = BuildSettings().update(fold=not no_fold, verbose=verbose)

    try:
        execute(load_bundled(), settings)
        sys.stdout.write('\n')
        sys.stdout.flush()
        sys.exit(EXIT_HALT)

    except MalformedProgram as e:
        lg.error(f'Malformed program: {e}')
        sys.exit(EXIT_MALFORMED)

    except cpu.PointerUnderflow as e:
        lg.error(f'Execution halted on pointer underflow: {e}')
        sys.exit(EXIT_UNDERFLOW)

    except KeyboardInterrupt:
        lg.info('Execution halted by the user')
        sys.exit(EXIT_KEYBOARD)

    except Exception as e:
        lg.info(f'Execution halted on general error {e}')
        traceback.print_exc()
        sys.exit(EXIT_EXEC_ERROR)


if __name__ == '__main__':
    run()
