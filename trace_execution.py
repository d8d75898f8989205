import sys

FORMATS = {
    '>': "> Move pointer right: {pos} [{val}]",
    '<': "< Move pointer left: {pos} [{val}]",
    '+': "+ increment pos: {pos} [{val}]",
    '-': "- decrement pos: {pos} [{val}]",
    '.': ". output value of: {pos} [{val}]",
}


class Tracer:
    """
    Debug observer called by the interpreter once per executed instruction
    with the cursor and cell value after the instruction took effect.

    ',' is reported with read=False when the device hit end of input.
    '[' is reported on every loop test at the depth of the enclosing scope.
    """

    def __init__(self, stream=None):
        self.stream = stream

    def __call__(self, char, pos, val, depth, read=True):
        if char == '[':
            if val != 0:
                line = f"[ while item {pos} not '0' [{val}]:"
            else:
                line = f"[ item {pos} is '0' [{val}]"
        elif char == ',':
            what = "input" if read else "EOF"
            line = f", read {what} in: {pos} [{val}]"
        else:
            line = FORMATS[char].format(pos=pos, val=val)

        stream = self.stream if self.stream is not None else sys.stdout
        stream.write(" " * ((depth + 1) * 2) + line + "\n")
        stream.flush()
