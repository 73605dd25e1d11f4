''' Source grammar: operator characters separated by free-form commentary '''

import re

import pyparsing as pp

import tapevm.common.ops as ops


def g_cmd(literal: str, op: int):
    return pp.Literal(literal).set_parse_action(lambda _: op)


# Anything that is not an operator carries no meaning
comment = pp.Suppress(pp.Regex('[^' + re.escape(''.join(ops.CHARS)) + ']+'))

mvr_cmd = g_cmd('>', ops.MVR)
mvl_cmd = g_cmd('<', ops.MVL)
inc_cmd = g_cmd('+', ops.INC)
dec_cmd = g_cmd('-', ops.DEC)
out_cmd = g_cmd('.', ops.OUT)
inp_cmd = g_cmd(',', ops.INP)
lop_cmd = g_cmd('[', ops.LOP)
lcl_cmd = g_cmd(']', ops.LCL)

tape_cmd = mvr_cmd \
    | mvl_cmd \
    | inc_cmd \
    | dec_cmd \
    | out_cmd \
    | inp_cmd \
    | lop_cmd \
    | lcl_cmd

program = pp.ZeroOrMore(tape_cmd | comment)
