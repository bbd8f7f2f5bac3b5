# -*- coding: utf-8 -*-
"""
The LS8 processor: register file, ALU and the fetch-decode-execute loop.
"""
import logging
import sys

from pyls8.opcodes import (AluOp, InvalidInstructionError, Opcode, alu_op,
                           decode, operand_count)
from pyls8.ram import RAM

log = logging.getLogger(__name__)

# Register 7 holds the stack pointer. An empty stack points at 0xF4 and the
# stack grows down towards the program.
SP = 7
STACK_START = 0xf4
NUM_REGISTERS = 8


class Registers:
    '''
    An object for holding all the information about the LS8 registers
    '''
    def __init__(self):
        '''
        Initialise the registers by performing a reset.
        '''
        # Bits of the FL register, laid out as 00000LGE
        self.flagbyte = {
            'L': 4,         # Less-than flag
            'G': 2,         # Greater-than flag
            'E': 1,         # Equal flag
        }
        self.reset()

    def __repr__(self):
        '''
        Representation of object, showing content of all registers
        '''
        regs = ' '.join(f'R{i}: 0x{value:02x}'
                        for i, value in enumerate(self.reg))
        return f'{regs} PC: 0x{self.pc:02x} FL: {self.fl:08b}'

    def reset(self):
        '''
        Set all general purpose registers to zero apart from the stack
        pointer, which points at the empty stack. Program counter goes back to
        the start of memory and all flags are cleared.
        '''
        self.reg = NUM_REGISTERS*[0]
        self.reg[SP] = STACK_START
        self.pc = 0
        self.fl = 0

    @property
    def sp(self):
        return self.reg[SP]

    @sp.setter
    def sp(self, value):
        self.reg[SP] = value & 0xff

    def read(self, index):
        '''
        Value held in register index
        '''
        self.check_index(index)
        return self.reg[index]

    def write(self, index, value):
        '''
        Store value in register index, keeping it to 8 bits
        '''
        self.check_index(index)
        self.reg[index] = value & 0xff

    def check_index(self, index):
        # Operands are whole bytes, so anything past R7 is a bad program
        if not 0 <= index < NUM_REGISTERS:
            raise RegisterIndexError(f'No register R{index}')

    def get_flag(self, flag):
        '''
        Return a boolean that describes the state of the flag in the FL
        register.
        '''
        return bool(self.fl & self.flagbyte[flag])

    def set_flag(self, flag, value=True):
        '''
        Set particular flag to a value (either True or False)
        '''
        if value:
            self.fl = self.fl | self.flagbyte[flag]
        else:
            # Flip bits of flagbyte so we can set flag to zero, but keep
            # everything else - 00000010 -> 11111101
            invert = 0xff - self.flagbyte[flag]
            self.fl = self.fl & invert

    def clear_flags(self):
        '''
        Clears all the flags in the FL register
        '''
        self.fl = 0


class Processor:
    '''
    Processor of the LS8
    '''
    def __init__(self, ram=None, output=None):
        '''
        Initialise the LS8 with its memory. Programs are copied into memory
        with load() and started with run().

        PRN writes to output, which defaults to standard output.
        '''
        self.ram = ram if ram is not None else RAM()
        self.output = output
        self.r = Registers()
        self.halted = False

        # Dictionary holding each instruction. Value for each key is a 4-tuple
        # of (name string, function to call, fixed argument, whether it sets
        # the PC itself). ALU instructions get their ALU selector as the fixed
        # argument.
        self._ops = {Opcode.LDI: ('LDI', self.LDI, None, False),
                     Opcode.ADD: ('ADD', self.alu, alu_op(Opcode.ADD), False),
                     Opcode.MUL: ('MUL', self.alu, alu_op(Opcode.MUL), False),
                     Opcode.CMP: ('CMP', self.alu, alu_op(Opcode.CMP), False),
                     Opcode.PRN: ('PRN', self.PRN, None, False),
                     Opcode.PUSH: ('PUSH', self.PUSH, None, False),
                     Opcode.POP: ('POP', self.POP, None, False),
                     Opcode.CALL: ('CALL', self.CALL, None, True),
                     Opcode.RET: ('RET', self.RET, None, True),
                     Opcode.HLT: ('HLT', self.HLT, None, False)}

        self.reset()

    def reset(self):
        '''
        Zero memory and registers, ready for a program to be loaded
        '''
        self.ram.reset()
        self.r.reset()
        self.halted = False

    def load(self, program):
        '''
        Copy program bytes into memory starting at address 0
        '''
        count = self.ram.load(program)
        log.debug('Loaded %d bytes', count)
        return count

    def fetch(self):
        '''
        Reads the instruction at the program counter together with the two
        bytes after it. Operands are always read, whether the instruction
        uses them or not.
        '''
        pc = self.r.pc
        return (self.ram.read(pc), self.ram.read(pc + 1),
                self.ram.read(pc + 2))

    def trace(self):
        '''
        One line summary of the machine state, useful when debugging programs
        '''
        ir, operand_a, operand_b = self.fetch()
        regs = ' '.join(f'{value:02X}' for value in self.r.reg)
        return (f'TRACE: {self.r.pc:02X} | {ir:02X} {operand_a:02X} '
                f'{operand_b:02X} | {regs}')

    def step(self):
        '''
        Steps through to the next instruction - fetches it from memory, decodes
        instruction and executes. Returns False once the machine has halted.
        '''
        if self.halted:
            return False

        # Fetch instruction
        ir, operand_a, operand_b = self.fetch()

        # Decode instruction
        try:
            opcode = decode(ir)
        except InvalidInstructionError:
            raise InvalidInstructionError(ir, self.r.pc) from None
        name, instruction, argument, sets_pc = self._ops[opcode]

        if log.isEnabledFor(logging.DEBUG):
            log.debug('%s | %s', self.trace(), name)

        # Execute
        if argument is None:
            instruction(operand_a, operand_b)
        else:
            instruction(argument, operand_a, operand_b)

        # Move on to the next instruction, unless we've jumped
        if not sets_pc:
            self.r.pc = (self.r.pc + operand_count(ir) + 1) & 0xff

        return not self.halted

    def run(self, max_steps=None):
        '''
        Execute instructions until HLT. Returns the number of instructions
        executed. If max_steps is given and the program is still running
        after that many instructions, StepLimitError is raised.
        '''
        steps = 0
        while not self.halted:
            if max_steps is not None and steps >= max_steps:
                raise StepLimitError(
                    f'No HLT after {steps} instructions (PC 0x{self.r.pc:02x})')
            self.step()
            steps += 1
        return steps

    def stack_push(self, value):
        '''
        Push value onto stack
        '''
        self.r.sp = self.r.sp - 1
        self.ram.write(self.r.sp, value)

    def stack_pull(self):
        '''
        Pull value from stack
        '''
        value = self.ram.read(self.r.sp)
        self.r.sp = self.r.sp + 1
        return value

    def alu(self, op, reg_a, reg_b):
        '''
        Arithmetic between two registers. The result goes back into reg_a,
        except for CMP which only sets the flags.
        '''
        value1 = self.r.read(reg_a)
        value2 = self.r.read(reg_b)

        if op == AluOp.ADD:
            self.r.write(reg_a, value1 + value2)
        elif op == AluOp.MUL:
            self.r.write(reg_a, value1 * value2)
        elif op == AluOp.CMP:
            # Exactly one flag is left set
            self.r.clear_flags()
            if value1 == value2:
                self.r.set_flag('E')
            elif value1 < value2:
                self.r.set_flag('L')
            else:
                self.r.set_flag('G')
        else:
            raise ValueError(f'Unsupported ALU operation {op!r}')

    ######## Instructions ########
    def LDI(self, reg, value):
        '''
        Load immediate value into register
        '''
        self.r.write(reg, value)

    def PRN(self, reg, _):
        '''
        Print the value in register as a decimal number
        '''
        output = self.output if self.output is not None else sys.stdout
        print(self.r.read(reg), file=output)

    def PUSH(self, reg, _):
        '''
        Push the value in register onto the stack
        '''
        self.stack_push(self.r.read(reg))

    def POP(self, reg, _):
        '''
        Pop the top of the stack into register
        '''
        # SP only moves once the register is known to exist
        self.r.check_index(reg)
        self.r.write(reg, self.stack_pull())

    def CALL(self, reg, _):
        '''
        Call subroutine at the address held in register. The address of the
        instruction after the CALL goes on the stack.
        '''
        addr = self.r.read(reg)
        self.stack_push((self.r.pc + 2) & 0xff)
        self.r.pc = addr

    def RET(self, *_):
        '''
        Return from subroutine
        '''
        self.r.pc = self.stack_pull()

    def HLT(self, *_):
        '''
        Halt the processor
        '''
        self.halted = True


class RegisterIndexError(IndexError):
    pass


class StepLimitError(RuntimeError):
    pass
