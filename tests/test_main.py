#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
#  test_main.py
#
'''
Tests the ls8 command line
'''
import logging
import pathlib

import pytest

from pyls8.__main__ import main

FILES = pathlib.Path(__file__).resolve().parent.parent / 'docs' / 'files'


def write_program(tmp_path, *lines):
    path = tmp_path / 'prog.ls8'
    path.write_text(''.join(f'{line}\n' for line in lines), encoding='utf-8')
    return str(path)


def test_print8(capsys):
    assert main([str(FILES / 'print8.ls8')]) == 0
    assert capsys.readouterr().out == '8\n'


def test_mult(capsys):
    assert main([str(FILES / 'mult.ls8')]) == 0
    assert capsys.readouterr().out == '72\n'


def test_call(capsys):
    assert main([str(FILES / 'call.ls8')]) == 0
    assert capsys.readouterr().out.split() == ['20', '30', '36', '60']


def test_missing_argument(capsys):
    '''
    No program named is a usage error
    '''
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code != 0
    assert 'usage' in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    missing = str(tmp_path / 'nothere.ls8')
    assert main([missing]) == 1
    captured = capsys.readouterr()
    assert captured.out == ''
    assert 'nothere.ls8' in captured.err


def test_invalid_instruction(tmp_path, capsys):
    '''
    Unknown opcode is reported with its address, and nothing else runs
    '''
    prog = write_program(tmp_path, '11111111', '01000111', '00000000',
                         '00000001')
    assert main([prog]) == 1
    captured = capsys.readouterr()
    assert captured.out == ''
    assert 'Unknown instruction ff at address 00' in captured.err


def test_invalid_after_output(tmp_path, capsys):
    prog = write_program(tmp_path, '10000010', '00000000', '00000011',
                         '01000111', '00000000', '00000000')
    assert main([prog]) == 1
    captured = capsys.readouterr()
    assert captured.out == '3\n'
    assert 'Unknown instruction 00 at address 05' in captured.err


def test_max_steps(tmp_path, capsys):
    # LDI R0,0 / CALL R0 loops forever
    prog = write_program(tmp_path, '10000010', '00000000', '00000000',
                         '01010000', '00000000')
    assert main(['--max-steps', '20', prog]) == 1
    assert 'No HLT after 20 instructions' in capsys.readouterr().err


def test_dump(capsys):
    assert main(['--dump', str(FILES / 'cmp.ls8')]) == 0
    err = capsys.readouterr().err
    assert 'R0: 0x05' in err
    assert 'FL: 00000100' in err


def test_bad_register(tmp_path, capsys):
    # LDI R9,1
    prog = write_program(tmp_path, '10000010', '00001001', '00000001',
                         '00000001')
    assert main([prog]) == 1
    assert 'No register R9' in capsys.readouterr().err


@pytest.fixture
def package_logger():
    '''
    Put the package logger level back after a test changes it
    '''
    logger = logging.getLogger('pyls8')
    level = logger.level
    yield logger
    logger.setLevel(level)


def trace_lines(caplog):
    return [rec.getMessage() for rec in caplog.records
            if rec.name == 'pyls8.cpu' and rec.getMessage().startswith('TRACE')]


def test_trace(package_logger, caplog, capsys):
    '''
    --trace logs one TRACE line per instruction, and the program output is
    unchanged
    '''
    assert main(['--trace', str(FILES / 'print8.ls8')]) == 0
    lines = trace_lines(caplog)
    assert len(lines) == 3
    assert lines[0] == ('TRACE: 00 | 82 00 08 | '
                        '00 00 00 00 00 00 00 F4 | LDI')
    assert lines[1].endswith('| PRN')
    assert lines[2].startswith('TRACE: 05 | 01')
    assert capsys.readouterr().out == '8\n'


def test_no_trace(package_logger, caplog, capsys):
    assert main([str(FILES / 'print8.ls8')]) == 0
    assert trace_lines(caplog) == []
