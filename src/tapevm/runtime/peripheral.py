import sys
from typing import IO


class InputSource:
    def read_byte(self) -> int | None:
        ''' Next input byte, None once the input is exhausted '''
        raise NotImplementedError()


class OutputSink:
    def write_byte(self, value: int):
        raise NotImplementedError()

    def flush(self):
        pass


class BufferInput(InputSource):
    def __init__(self, data: bytes = b''):
        self.data = bytes(data)
        self.offset = 0

    def read_byte(self) -> int | None:
        if self.offset >= len(self.data):
            return None

        value = self.data[self.offset]
        self.offset += 1
        return value


class BufferOutput(OutputSink):
    def __init__(self):
        self.data = bytearray()

    def write_byte(self, value: int):
        self.data.append(value)

    def getvalue(self) -> bytes:
        return bytes(self.data)


class StdinInput(InputSource):
    def __init__(self, stream: IO[bytes] | None = None):
        self.stream = sys.stdin.buffer if stream is None else stream

    def read_byte(self) -> int | None:
        buf = self.stream.read(1)

        if not buf:
            return None

        return buf[0]


class StdoutOutput(OutputSink):
    def __init__(self, stream: IO[str] | None = None):
        self.stream = sys.stdout if stream is None else stream

    def write_byte(self, value: int):
        # Raw byte shown as its Latin-1 character
        self.stream.write(chr(value))

    def flush(self):
        self.stream.flush()
