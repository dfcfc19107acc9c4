''' Shared fixtures '''

import pytest
from atoms import Intrinsic
from execution import Runtime
from interpreter import Interpreter
import intrinsics  # ignore 'Unused import' warning, registers the intrinsic classes

@pytest.fixture
def runtime() -> Runtime:
    runtime = Runtime()
    for intrinsic in Intrinsic.classes: intrinsic().register(runtime)
    return runtime

@pytest.fixture
def interpreter() -> Interpreter:
    return Interpreter(color=False, echo=False)

@pytest.fixture
def run(interpreter, capsys):
    ''' Feeds lines to the interpreter, returns what was printed. '''
    def run_lines(*lines: str) -> str:
        for line in lines: interpreter.execute_input(line + '\n')
        return capsys.readouterr().out
    return run_lines
