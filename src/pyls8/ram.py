# -*- coding: utf-8 -*-
"""
Random access memory shared by program code, data and the stack.

The LS8 has an 8-bit address bus, so there are exactly 256 cells and every
address produced by the CPU wraps back into range.
"""
import array
from typing import Iterable


MEMORY_SIZE = 0x100


class RAM:
    '''
    Flat 256 byte memory that the LS8 reads instructions from and uses for
    its stack
    '''
    def __init__(self) -> None:
        '''
        Create the memory array. All cells start at zero.
        '''
        self.memory = array.array('B', MEMORY_SIZE*[0])

    def __len__(self) -> int:
        return len(self.memory)

    def reset(self) -> None:
        '''
        Zero every memory cell
        '''
        for addr in range(MEMORY_SIZE):
            self.memory[addr] = 0

    def read(self, addr: int) -> int:
        '''
        Reads byte of data from address addr
        '''
        return self.memory[addr & 0xff]

    def write(self, addr: int, value: int) -> int:
        '''
        Writes value of data to address, and hands the stored value back.
        '''
        self.memory[addr & 0xff] = value
        return value

    def load(self, program: Iterable[int], start: int = 0) -> int:
        '''
        Copy a program into memory, one byte per address, beginning at start.
        Inputs:
            program     -   Ordered bytes of the program
            start       -   Address of the first byte (normally 0)
        Returns the number of bytes written.
        '''
        data = bytes(program)

        # Whole program has to fit before anything is written
        if start < 0 or start + len(data) > MEMORY_SIZE:
            raise MemoryRangeError(
                f'{len(data)} byte program does not fit at 0x{start:02x}')

        for offset, value in enumerate(data):
            self.memory[start + offset] = value
        return len(data)

    def dump(self, start: int = 0, length: int = MEMORY_SIZE) -> bytes:
        '''
        Copy of a region of memory, wrapping past the top address
        '''
        return bytes(self.memory[(start + i) & 0xff] for i in range(length))


class MemoryRangeError(ValueError):
    pass
