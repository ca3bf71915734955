"""A Brainfuck interpreter with a wrapping 30000-cell tape."""

from __future__ import annotations

import sys
from itertools import islice

TAPE_SIZE = 30000


class UnterminatedLoopError(Exception):
    """Raised when a loop bracket has no matching partner."""


class Interpreter:
    """Runs a Brainfuck program against a fixed input."""

    def __init__(self, program: str, input_data: str | bytes) -> None:
        self.program = program
        self.input_data = input_data.encode() if isinstance(input_data, str) else bytes(input_data)
        self.cells = bytearray(TAPE_SIZE)
        self.pointer = 0
        self.position = 0
        self._input_position = 0
        self._loop_starts: list[int] = []
        self._output: list[str] = []

    @property
    def output(self) -> str:
        """Text written by the program so far."""
        return "".join(self._output)

    def _next_instruction(self) -> str | None:
        if self.position >= len(self.program):
            return None
        instruction = self.program[self.position]
        self.position += 1
        return instruction

    def _read_byte(self) -> int:
        if self._input_position >= len(self.input_data):
            return 0
        byte = self.input_data[self._input_position]
        self._input_position += 1
        return byte

    def _skip_loop(self) -> None:
        depth = 0
        while (instruction := self._next_instruction()) is not None:
            if instruction == "[":
                depth += 1
            elif instruction == "]":
                if depth == 0:
                    return
                depth -= 1
        raise UnterminatedLoopError("loop is never closed")

    def step(self) -> bool:
        """Execute one instruction; return False once the program has ended."""
        instruction = self._next_instruction()
        if instruction is None:
            return False
        if instruction == ">":
            self.pointer = (self.pointer + 1) % TAPE_SIZE
        elif instruction == "<":
            self.pointer = (self.pointer - 1) % TAPE_SIZE
        elif instruction == "+":
            self.cells[self.pointer] = (self.cells[self.pointer] + 1) % 256
        elif instruction == "-":
            self.cells[self.pointer] = (self.cells[self.pointer] - 1) % 256
        elif instruction == ".":
            self._output.append(chr(self.cells[self.pointer]))
        elif instruction == ",":
            self.cells[self.pointer] = self._read_byte()
        elif instruction == "[":
            if self.cells[self.pointer] == 0:
                self._skip_loop()
            else:
                self._loop_starts.append(self.position)
        elif instruction == "]":
            if self.cells[self.pointer] == 0:
                if self._loop_starts:
                    self._loop_starts.pop()
            else:
                if not self._loop_starts:
                    raise UnterminatedLoopError("loop end without a start")
                self.position = self._loop_starts[-1]
        return True

    def run(self) -> str:
        """Run the program to its end and return everything it wrote."""
        while self.step():
            pass
        return self.output


def run(program: str, input_data: str | bytes = b"") -> str:
    """Run program on input_data and return its output."""
    return Interpreter(program, input_data).run()


def main(argv=None) -> None:
    """Read instances from standard input and print each program's output."""
    lines = iter(sys.stdin)
    count = int(next(lines, "0"))
    for number in range(1, count + 1):
        rows = list(islice(lines, 3))
        rows += [""] * (3 - len(rows))
        _, input_data, program = rows
        print(f"Instancia {number}")
        sys.stdout.write(run(program.strip(), input_data.strip()))
        sys.stdout.write("\n\n")