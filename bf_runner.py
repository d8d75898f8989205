import sys

from bf_errors import UnmatchedBracketError
from bf_getch import TerminalInput


def find_closing(code, start):
    """
    Index of the ']' matching the '[' at `start`, found by counting
    brackets forward until the running level is back to zero.
    """
    lvl = 0
    for j in range(start, len(code)):
        c = code[j]
        if c == '[':
            lvl += 1
        elif c == ']':
            lvl -= 1
        if lvl == 0:
            return j
    raise UnmatchedBracketError("can't find closing brace!")


class Interpreter:
    """
    Runs program text straight from source against a Tape.

    Loops are not compiled: every iteration scans the loop body again from
    the character after its '[' until the ']' that closes it.
    """

    def __init__(self, tape, input_device=None, output=None, tracer=None):
        self.tape = tape
        self.output = output if output is not None else sys.stdout.buffer
        if input_device is None:
            input_device = TerminalInput(echo=self.output)
        self.input_device = input_device
        self.tracer = tracer

    def execute(self, code, depth=0):
        self.run_block(code, 0, depth)

    def run_block(self, code, pc, depth):
        """
        Execute `code` from `pc` until the end of text or a ']' closing the
        current scope. Returns the index where scanning stopped.
        """
        tape = self.tape
        trace = self.tracer

        while pc < len(code):
            c = code[pc]
            read = True
            if c == '>':
                tape.move_right()
            elif c == '<':
                tape.move_left()
            elif c == '+':
                tape.increment()
            elif c == '-':
                tape.decrement()
            elif c == '.':
                self.output.write(bytes([tape.cell]))
                self.output.flush()
            elif c == ',':
                ch = self.input_device.read_byte()
                if ch is not None:
                    tape.cell = ch
                else:
                    read = False
            elif c == '[':
                end = find_closing(code, pc)
                while True:
                    if trace:
                        trace(c, tape.ptr, tape.cell, depth)
                    if tape.cell == 0:
                        break
                    self.run_block(code, pc + 1, depth + 1)
                pc = end + 1
                continue
            elif c == ']':
                if depth == 0:
                    raise UnmatchedBracketError("found unmatched brace!")
                return pc
            else:
                pc += 1
                continue

            if trace:
                trace(c, tape.ptr, tape.cell, depth, read)
            pc += 1

        return pc
