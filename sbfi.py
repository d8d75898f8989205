#!/usr/bin/env python3
import sys
import argparse

from bf_errors import ConfigurationError, SbfiError
from bf_runner import Interpreter
from bf_tape import DEFAULT_TAPE_SIZE, Tape
from trace_execution import Tracer

__version__ = "0.3"

MAX_SOURCE_LENGTH = 65535


class Colors:
    BLUE = '\033[94m'
    GREEN = '\033[92m'
    WARNING = '\033[93m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'


def version():
    print(f"{Colors.BOLD}sbfi - simple brainfuck interpreter{Colors.ENDC}")
    print(f"v{__version__}")


class OptionParser(argparse.ArgumentParser):
    def error(self, message):
        raise ConfigurationError(message)


def tape_size(value):
    try:
        size = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid size '{value}'!")
    if size <= 0:
        raise argparse.ArgumentTypeError(f"Invalid size of {size}!")
    return size


def parse_args(argv=None):
    parser = OptionParser(prog="sbfi", description="simple brainfuck interpreter")
    parser.add_argument("-c", "--size", type=tape_size, default=DEFAULT_TAPE_SIZE,
                        help="number of cells on the tape (default: %(default)s)")
    parser.add_argument("-f", "--file", help="run the program in FILE instead of starting a prompt")
    parser.add_argument("-d", "--debug", action="store_true", help="trace every executed instruction")
    parser.add_argument("--version", action="version", version=f"sbfi - simple brainfuck interpreter v{__version__}")

    args, unknown = parser.parse_known_args(argv)
    if unknown:
        raise ConfigurationError(f"Unknown argument: '{unknown[0]}'")
    return args


def read_source(f):
    """Concatenate the lines of `f` with their line breaks removed."""
    code = "".join(line.rstrip("\r\n") for line in f)
    return code[:MAX_SOURCE_LENGTH]


class Shell:
    """
    Interactive prompt. Every line is either a command or program text that
    runs against the same tape as all previous lines.
    """

    PROMPT = f"{Colors.BLUE}>>>{Colors.ENDC} "

    def __init__(self, interpreter, input_provider=input):
        self.interp = interpreter
        self.tape = interpreter.tape
        self.input_provider = input_provider

    def run(self):
        while True:
            try:
                line = self.input_provider(self.PROMPT)
            except EOFError:
                print()
                break
            except KeyboardInterrupt:
                print()
                continue

            if not self.handle(line):
                break

    def handle(self, line):
        """Returns False once the session should end."""
        cmd = line.strip()

        if cmd == 'exit':
            print("Exiting...")
            return False
        elif cmd == 'clear':
            print("Clear stack!")
            self.tape.reset()
        elif cmd == 'len':
            print(f"Stack length: {len(self.tape)}")
        elif cmd.startswith('show'):
            self.show(self.int_arg(cmd[4:], 0))
        elif cmd.startswith('print'):
            self.print_tape(self.int_arg(cmd[5:], 16))
        else:
            self.run_line(line)
        return True

    @staticmethod
    def int_arg(rest, default):
        parts = rest.split()
        try:
            return int(parts[0]) if parts else default
        except ValueError:
            return default

    def show(self, pos):
        pos = max(0, min(pos, len(self.tape) - 1))
        val = self.tape.read_at(pos)
        char = chr(val) if 32 <= val < 127 else '.'
        print(f"#{pos} element: {val:3} [{char}]")

    def print_tape(self, num):
        num = max(0, min(num, len(self.tape)))
        print(f"First {num} entries of stack:")
        vals = []
        for i in range(num):
            val = self.tape.read_at(i)
            if i == self.tape.ptr:
                vals.append(f"[{val:3}]")
            else:
                vals.append(f"{val:3}")
        print(" ".join(vals))

    def run_line(self, line):
        sys.stdout.flush()
        try:
            self.interp.execute(line.rstrip("\r\n"))
        except SbfiError as e:
            sys.stdout.flush()
            print(e.report(), file=sys.stderr)
        except KeyboardInterrupt:
            print(f"\n{Colors.WARNING}Interrupted{Colors.ENDC}")


def main(argv=None):
    try:
        args = parse_args(argv)
    except ConfigurationError as e:
        print(e.report(), file=sys.stderr)
        return 1

    infile = None
    if args.file:
        try:
            infile = open(args.file, 'r', errors='replace')
        except OSError:
            print(f"Can't open file '{args.file}'", file=sys.stderr)
            return 1

    if infile is None:
        version()

    if args.debug:
        print(f"{Colors.GREEN}Debug Mode!{Colors.ENDC}")
        print(f"Generating stack with {args.size} items")

    try:
        tape = Tape(args.size)
    except SbfiError as e:
        print(e.report(), file=sys.stderr)
        if infile:
            infile.close()
        return 1

    interp = Interpreter(tape, tracer=Tracer() if args.debug else None)

    if infile is None:
        Shell(interp).run()
        return 0

    with infile:
        if args.debug:
            print(f"Reading file '{args.file}'")
        code = read_source(infile)

    try:
        interp.execute(code)
    except SbfiError as e:
        sys.stdout.flush()
        print(e.report(), file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
