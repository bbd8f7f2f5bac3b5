# -*- coding: utf-8 -*-
"""
A simple Python based emulator for the LS8 educational 8-bit processor
"""
from pyls8.cpu import Processor, Registers
from pyls8.loader import load_program, parse_program
from pyls8.ram import RAM

__version__ = '0.1.0'

__all__ = ['Processor', 'Registers', 'RAM', 'load_program', 'parse_program']
