import pytest

from tapevm.common.instructions import Jump, LoopOpen, LoopClose, Program
from tapevm.compile.lexer import tokenize
from tapevm.compile.fold import fold
from tapevm.compile.link import link, jump_table, MalformedProgram

from unit_utils import HELLO


def test_nested_targets():
    program = link(tokenize('[[]]'))
    assert [i.target for i in program] == [3, 2, 1, 0]  # type: ignore


def test_targets_are_mutual_inverses():
    for source in [HELLO, '[][]', '+[>[-]<[[]]]', '[.[,[+]-]>]<']:
        program = link(fold(tokenize(source)))
        table = jump_table(program)

        for index, target in table.items():
            assert table[target] == index

            if isinstance(program[index], LoopOpen):
                assert target > index
                assert isinstance(program[target], LoopClose)
            else:
                assert target < index
                assert isinstance(program[target], LoopOpen)


def test_every_bracket_resolved():
    program = link(tokenize(HELLO))
    jumps = [i for i in program if isinstance(i, Jump)]
    assert jumps
    assert all(j.target is not None for j in jumps)


def test_non_brackets_untouched():
    instructions = fold(tokenize('++>[-]<.'))
    program = link(instructions)

    for before, after in zip(instructions, program):
        if not isinstance(before, Jump):
            assert before is after


def test_input_not_modified():
    instructions = tokenize('[]')
    link(instructions)
    assert instructions == [LoopOpen(), LoopClose()]


def test_unmatched_open():
    with pytest.raises(MalformedProgram) as e:
        link(tokenize('['))

    assert e.value.index == 0


def test_unmatched_close():
    with pytest.raises(MalformedProgram) as e:
        link(tokenize('[]]'))

    assert e.value.index == 2


def test_unmatched_inner_open():
    with pytest.raises(MalformedProgram) as e:
        link(tokenize('+[[]'))

    assert e.value.index == 1


def test_jump_table_needs_linking():
    with pytest.raises(MalformedProgram):
        jump_table(Program(tokenize('[]')))


def test_empty_program():
    program = link([])
    assert program.last == 0
    assert jump_table(program) == {}
