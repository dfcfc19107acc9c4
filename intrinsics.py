''' All intrinsic implementations '''

from atoms import Intrinsic
from execution import Runtime, LoopInterrupt

class Bye(Intrinsic):
    def __init__(self): super().__init__('bye', 'leave the interpreter')
    def execute(self, runtime: Runtime) -> None: raise LoopInterrupt()

class Print(Intrinsic):
    def __init__(self): super().__init__('.', 'a --  , print a')
    def execute(self, runtime: Runtime) -> None:
        print(runtime.stack.pop(), end='')

class PrintStack(Intrinsic):
    def __init__(self): super().__init__('.s', 'print stack size and content')
    def execute(self, runtime: Runtime) -> None:
        values = runtime.stack.peek_all()
        print(f'<{len(values)}> ' + ''.join(f'{value} ' for value in values), end='')

class Add(Intrinsic):
    def __init__(self): super().__init__('+', 'a b -- a+b')
    def execute(self, runtime: Runtime) -> None: runtime.stack.add()
