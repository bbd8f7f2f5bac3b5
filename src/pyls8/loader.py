# -*- coding: utf-8 -*-
"""
Reads LS8 programs written as text, one instruction byte per line in binary:

    10000010 # LDI R0,8
    00000000
    00001000

Anything after a # is a comment, and lines that don't start with a binary
number are ignored.
"""
import logging
import re
from typing import Iterable, List

log = logging.getLogger(__name__)

_BINARY = re.compile(r'\s*([01]+)')


def parse_program(lines: Iterable[str]) -> List[int]:
    '''
    Convert lines of program text into the bytes to load into memory
    '''
    program = []
    for line in lines:
        line = line.split('#', 1)[0]
        match = _BINARY.match(line)
        if match is None:
            continue
        # Only the low 8 bits fit in a memory cell
        program.append(int(match.group(1), 2) & 0xff)
    return program


def load_program(filename) -> List[int]:
    '''
    Read and parse a program file
    '''
    try:
        with open(filename, encoding='utf-8') as fi:
            program = parse_program(fi)
    except (OSError, UnicodeDecodeError) as exc:
        raise ProgramLoadError(filename, exc) from exc

    log.debug('Read %d bytes from %s', len(program), filename)
    return program


class ProgramLoadError(OSError):
    '''
    Program file is missing or can't be read
    '''
    def __init__(self, filename, reason=None):
        super().__init__(f"cannot read program '{filename}'")
        self.filename = filename
        self.reason = reason

    def __str__(self):
        return self.args[0]
