''' Intrinsic words '''

import pytest
from atoms import StackUnderflow
from execution import LoopInterrupt

def test_print_pops_and_emits(runtime, capsys):
    runtime.evaluate(['3', '4', '.'])
    assert capsys.readouterr().out == '4'
    assert runtime.stack.peek_all() == [3]

def test_print_empty_stack(runtime, capsys):
    with pytest.raises(StackUnderflow):
        runtime.evaluate(['.'])
    assert capsys.readouterr().out == ''

def test_print_stack(runtime, capsys):
    runtime.evaluate(['1', '2', '3', '.s'])
    assert capsys.readouterr().out == '<3> 1 2 3 '
    assert runtime.stack.peek_all() == [1, 2, 3]

def test_print_empty_stack_content(runtime, capsys):
    runtime.evaluate(['.s'])
    assert capsys.readouterr().out == '<0> '

def test_add_underflow(runtime):
    with pytest.raises(StackUnderflow):
        runtime.evaluate(['1', '+'])
    assert runtime.stack.peek_all() == [1]

def test_bye_interrupts_remaining_tokens(runtime):
    with pytest.raises(LoopInterrupt):
        runtime.evaluate(['1', 'bye', '2'])
    assert runtime.stack.peek_all() == [1]

def test_every_intrinsic_is_registered(runtime):
    assert set(runtime.intrinsics) == {'bye', '.', '.s', '+'}
