# -*- coding: utf-8 -*-
"""
LS8 instruction encodings.

Every instruction byte is laid out as AABCDDDD (most significant bit first):
    AA      number of operand bytes following the instruction (0-2)
    B       1 if the instruction is carried out by the ALU
    C       reserved, set on the historical CALL and RET encodings
    DDDD    instruction identifier

The historical encodings reuse identifiers (LDI and MUL are both 0010, RET
and HLT differ only in C), so an instruction is only picked out by its whole
byte.
"""
from enum import IntEnum


class Opcode(IntEnum):
    '''
    Instruction bytes, matching the historical LS8 assignments
    '''
    LDI = 0b10000010
    ADD = 0b10100000
    MUL = 0b10100010
    CMP = 0b10100111
    PRN = 0b01000111
    PUSH = 0b01000101
    POP = 0b01000110
    CALL = 0b01010000
    RET = 0b00010001
    HLT = 0b00000001


class AluOp(IntEnum):
    '''
    Operations the ALU understands. Values are the instruction identifiers.
    '''
    ADD = Opcode.ADD & 0xf
    MUL = Opcode.MUL & 0xf
    CMP = Opcode.CMP & 0xf


def operand_count(instruction: int) -> int:
    '''
    Number of operand bytes that follow the instruction
    '''
    return (instruction >> 6) & 0b11


def is_alu(instruction: int) -> bool:
    return bool(instruction & 0b00100000)


def identifier(instruction: int) -> int:
    return instruction & 0b00001111


def decode(instruction: int) -> Opcode:
    '''
    Turn an instruction byte into its Opcode. Bytes that are not part of the
    instruction set raise InvalidInstructionError.
    '''
    try:
        return Opcode(instruction)
    except ValueError:
        raise InvalidInstructionError(instruction) from None


def alu_op(opcode: Opcode) -> AluOp:
    '''
    ALU selector for an ALU instruction
    '''
    if not is_alu(opcode):
        raise ValueError(f'{opcode.name} is not an ALU instruction')
    return AluOp(identifier(opcode))


class InvalidInstructionError(ValueError):
    '''
    Raised when the byte fetched as an instruction is not in the instruction
    set. address is the program counter it was fetched from, when known.
    '''
    def __init__(self, opcode: int, address=None):
        self.opcode = opcode
        self.address = address
        if address is None:
            msg = f'Unknown instruction {opcode:02x}'
        else:
            msg = f'Unknown instruction {opcode:02x} at address {address:02x}'
        super().__init__(msg)
