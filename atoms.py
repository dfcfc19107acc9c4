''' Base classes for atoms and errors '''

from typing import Iterable, Set, Tuple, Type, TYPE_CHECKING
from colorama import Fore as fg
if TYPE_CHECKING: from execution import Runtime

class Error(Exception):
    ''' Abstract. Applicative Error. Reported on the current line, never fatal. '''
    def __init__(self, msg: str) -> None:
        super().__init__(msg)
        self.message = msg

class ParsingError(Error):
    ''' Raised by the parser. '''

class MalformedDefinition(ParsingError):
    ''' Raised when : and ; delimiters are duplicated, unmatched or misordered. '''

class ExecutionError(Error):
    ''' Raised during execution. '''

class StackUnderflow(ExecutionError):
    ''' Raised when an operation consumes more elements than the stack holds. '''
    def __init__(self) -> None:
        super().__init__('stack underflow')

class UnknownToken(ExecutionError):
    ''' Raised for a token that is neither a word nor a number. '''
    def __init__(self, token: str) -> None:
        super().__init__(f'{token} ?')
        self.token = token

class NamelessDefinition(ExecutionError):
    ''' Raised for a definition clause without a word name, such as :; '''
    def __init__(self, clause: str) -> None:
        super().__init__(f'missing word name in {clause}')

class DefinitionCycle(ExecutionError):
    ''' Raised when a word expands, directly or not, back into itself. '''
    def __init__(self, chain: Iterable[str]) -> None:
        self.chain = [*chain]
        super().__init__('definition cycle ' + ' -> '.join(self.chain))

class Atom:
    ''' Abstract. Resolved form of a token. '''
    def execute(self, runtime: 'Runtime') -> None:
        raise ExecutionError(f'atom {self} cannot be executed')

class NumberLiteral(Atom):
    ''' Integer literal, pushed on execution. '''
    def __init__(self, value: int) -> None:
        self.value = value
    def __str__(self) -> str:
        return f'{fg.CYAN}{self.value}{fg.RESET}'
    def execute(self, runtime: 'Runtime') -> None:
        runtime.stack.push(self.value)

class Word(Atom):
    ''' Dictionary word. Its body is substituted as a single token. '''
    def __init__(self, value: str) -> None:
        self.value = value
    def __str__(self) -> str:
        return f'{fg.YELLOW}{self.value}{fg.RESET}'
    def execute(self, runtime: 'Runtime') -> None:
        runtime.expand(self.value)

class Definition(Atom):
    '''
    Colon definition clause, as built by the parser: ": name body... ;".
    The leading : and an optional trailing ; are stripped, the first remaining
    token is the name and the rest, joined by single spaces, is the body.
    '''
    def __init__(self, name: str, body: str) -> None:
        self.name = name ; self.body = body
    @staticmethod
    def split(clause: str) -> Tuple[str, str]:
        text = clause[1:]
        if text.endswith(';'): text = text[:-1]
        parts = text.split()
        if len(parts) == 0: raise NamelessDefinition(clause)
        return parts[0], ' '.join(parts[1:])
    @classmethod
    def parse(cls, clause: str) -> 'Definition':
        return cls(*Definition.split(clause))
    def __str__(self) -> str:
        return f': {fg.YELLOW}{self.name}{fg.RESET} {self.body} ;'
    def execute(self, runtime: 'Runtime') -> None:
        runtime.words.define(self.name, self.body)

class Intrinsic(Atom):
    ''' Intrinsic implementation of a word. '''
    classes : Set[Type['Intrinsic']] = set()
    def __init_subclass__(cls) -> None: Intrinsic.classes.add(cls)
    def __init__(self, value: str = '', comment: str = '') -> None:
        self.value = value
        self.comment = comment
    def register(self, runtime: 'Runtime') -> None:
        runtime.register(self.value, self)
    def __str__(self) -> str:
        return f'{fg.LIGHTBLACK_EX}intrinsic<{type(self).__name__}>{fg.RESET} {fg.GREEN}({self.comment}){fg.RESET}'
