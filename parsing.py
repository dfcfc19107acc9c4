''' Parsing engine '''

from typing import Iterable, List
from atoms import MalformedDefinition

class Tokenizer:
    '''
    Syntaxical tokenizer. Turns a line into a series of tokens.
    Tokens are separated by runs of whitespace, there is no quoting nor escaping.
    '''

    def __init__(self, input_str: str) -> None:
        self.input = input_str

    def tokenize(self) -> Iterable[str]:
        yield from self.input.split()

class Parser:
    '''
    Definition parser.
    Validates the : and ; delimiters of a line and folds the definition span,
    if any, into a single compound token. Other tokens are passed through.
    '''
    DEFINE = ':'
    END = ';'

    def check_delimiters(self, tokens: List[str]) -> None:
        for delimiter in (Parser.DEFINE, Parser.END):
            if tokens.count(delimiter) > 1:
                raise MalformedDefinition(f'more than one {delimiter} in line')
        has_start = Parser.DEFINE in tokens ; has_end = Parser.END in tokens
        if has_start and not has_end: raise MalformedDefinition(f'missing closing {Parser.END}')
        if has_end and not has_start: raise MalformedDefinition(f'missing opening {Parser.DEFINE}')
        if has_start and tokens.index(Parser.DEFINE) > tokens.index(Parser.END):
            raise MalformedDefinition(f'{Parser.END} before {Parser.DEFINE}')

    def parse(self, input_str: str) -> List[str]:
        tokens = [*Tokenizer(input_str).tokenize()]
        self.check_delimiters(tokens)
        if Parser.DEFINE not in tokens: return tokens
        start, end = tokens.index(Parser.DEFINE), tokens.index(Parser.END)
        if end - start < 2: raise MalformedDefinition('missing word name')
        return tokens[:start] + [' '.join(tokens[start:end+1])] + tokens[end+1:]
