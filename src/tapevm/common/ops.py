# Pointer moves
MVR = 0x01  # DP + N -> DP
MVL = 0x02  # DP - N -> DP

# Cell arithmetic
INC = 0x11  # M[DP] + N -> M[DP]
DEC = 0x12  # M[DP] - N -> M[DP]

# I/O
OUT = 0x21  # M[DP] -> sink
INP = 0x22  # source -> M[DP]

# Flow
LOP = 0x31  # if M[DP] .eq 0 jmp past partner
LCL = 0x32  # if M[DP] .ne 0 jmp past partner

CHARS = {
    '>': MVR,
    '<': MVL,
    '+': INC,
    '-': DEC,
    '.': OUT,
    ',': INP,
    '[': LOP,
    ']': LCL
}

SYMBOLS = {op: char for char, op in CHARS.items()}

FOLDABLE = frozenset([MVR, MVL, INC, DEC])
