# -*- coding: utf-8 -*-
"""
An initial test programme to trial out the LS8 emulator. Runs the subroutine
example one instruction at a time and shows the registers after each step.
"""

from pyls8.cpu import Processor
from pyls8.loader import load_program
import os

# Read in programme from file
cwd = os.getcwd()
filename = os.path.join(cwd, 'files', 'call.ls8')
program = load_program(filename)

cpu = Processor()
cpu.load(program)

while cpu.step():
    print(cpu.r)
