# -*- coding: utf-8 -*-
"""
Command line front end: load an .ls8 program and run it.

    ls8 docs/files/mult.ls8
    python -m pyls8 --trace docs/files/call.ls8
"""
import argparse
import logging
import sys

from pyls8.cpu import Processor, RegisterIndexError, StepLimitError
from pyls8.loader import ProgramLoadError, load_program
from pyls8.opcodes import InvalidInstructionError
from pyls8.ram import MemoryRangeError


def build_parser():
    parser = argparse.ArgumentParser(
        prog='ls8', description='Run a program on the LS8 emulator')
    parser.add_argument('program', help='.ls8 program file')
    parser.add_argument('--trace', '-t', action='store_true',
                        help='print a TRACE line for every instruction')
    parser.add_argument('--dump', action='store_true',
                        help='print the registers to stderr after the run')
    parser.add_argument('--max-steps', type=int, default=None,
                        help='stop with an error after this many instructions')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.trace else logging.WARNING
    logging.basicConfig(level=level, format='%(message)s', stream=sys.stderr)
    # basicConfig does nothing if the root logger already has handlers
    logging.getLogger('pyls8').setLevel(level)

    try:
        program = load_program(args.program)
    except ProgramLoadError as exc:
        print(f'error: {exc}', file=sys.stderr)
        return 1

    cpu = Processor()
    try:
        cpu.load(program)
        cpu.run(max_steps=args.max_steps)
    except (InvalidInstructionError, RegisterIndexError, MemoryRangeError,
            StepLimitError) as exc:
        sys.stdout.flush()
        print(exc, file=sys.stderr)
        return 1
    finally:
        if args.dump:
            print(repr(cpu.r), file=sys.stderr)

    return 0


if __name__ == '__main__':
    sys.exit(main())
