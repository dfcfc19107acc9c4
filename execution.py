''' Execution engine '''

import sys
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple
from colorama import Fore as fg
from atoms import Atom, Word, Definition, NumberLiteral, Intrinsic, StackUnderflow, UnknownToken, DefinitionCycle

# integers are unbounded, so are their decimal renderings
if hasattr(sys, 'set_int_max_str_digits'): sys.set_int_max_str_digits(0)

class Dictionary:
    ''' User defined words. Maps a word name to its body, last definition wins. '''
    SEED: Mapping[str, str] = { 'test': '+' }

    def __init__(self, seed: Optional[Mapping[str, str]] = None) -> None:
        self.words: Dict[str, str] = dict(Dictionary.SEED if seed is None else seed)
    def define(self, name: str, body: str) -> None:
        self.words[name] = body
    def lookup(self, name: str) -> Optional[str]:
        return self.words.get(name)
    def __contains__(self, name: object) -> bool: return name in self.words
    def __len__(self) -> int: return len(self.words)
    def __iter__(self) -> Iterator[Tuple[str, str]]: return iter(self.words.items())

class Stack:
    ''' Integer stack. Operations check their arguments before mutating. '''
    def __init__(self, values: Iterable[int] = ()) -> None:
        self.values: List[int] = [*values]
    def push(self, value: int) -> None:
        self.values.append(value)
    def pop(self) -> int:
        if len(self.values) == 0: raise StackUnderflow()
        return self.values.pop()
    def peek_all(self) -> List[int]:
        return [*self.values]
    def add(self) -> None:
        if len(self.values) < 2: raise StackUnderflow()
        self.push(self.pop() + self.pop())
    def __len__(self) -> int: return len(self.values)

class Runtime:
    '''
    Runtime environement for execution.
    Holds the intrinsics, the dictionary of words and the stack, and resolves
    tokens into atoms. Resolution order: intrinsics, dictionary words,
    definitions (tokens starting with :), then integer literals.
    '''

    def __init__(self, trace: bool = False) -> None:
        self.intrinsics: Dict[str, Intrinsic] = {}
        self.words = Dictionary()
        self.stack = Stack()
        self.trace = trace

    def register(self, name: str, intrinsic: Intrinsic) -> None:
        self.intrinsics[name] = intrinsic

    @staticmethod
    def parse_number(token: str) -> Optional[int]:
        try: return int(token, 0)
        except ValueError: pass
        # leading zero: octal, 010 is 8
        digits = token.lstrip('+-')
        if len(digits) < 2 or digits[0] != '0': return None
        try: return int(token, 8)
        except ValueError: return None

    def resolve(self, token: str) -> Atom:
        if token in self.intrinsics: return self.intrinsics[token]
        if token in self.words: return Word(token)
        if token.startswith(':'): return Definition.parse(token)
        value = Runtime.parse_number(token)
        if value is None: raise UnknownToken(token)
        return NumberLiteral(value)

    def resolve_traced(self, token: str) -> Atom:
        atom = self.resolve(token)
        if self.trace: print(f'{fg.LIGHTBLACK_EX}  {token} =>{fg.RESET} {atom}', file=sys.stderr)
        return atom

    def run(self, token: str) -> None:
        self.resolve_traced(token).execute(self)

    def body(self, name: str) -> str:
        body = self.words.lookup(name)
        if body is None: raise UnknownToken(name)
        return body

    def expand(self, name: str) -> None:
        '''
        Substitutes the body of a word, as a single token. Chains of words are
        followed in a loop, any word met twice in a chain is a cycle.
        '''
        chain = [name]
        atom = self.resolve_traced(self.body(name))
        while isinstance(atom, Word):
            if atom.value in chain: raise DefinitionCycle(chain[chain.index(atom.value):] + [atom.value])
            chain.append(atom.value)
            atom = self.resolve_traced(self.body(atom.value))
        atom.execute(self)

    def evaluate(self, tokens: Iterable[str]) -> None:
        for token in tokens: self.run(token)

class LoopInterrupt(Exception):
    ''' Raise to interrupt the read loop. '''
