''' Tokenizer and definition parser '''

import pytest
from atoms import MalformedDefinition, ParsingError
from parsing import Tokenizer, Parser

def test_tokenize_splits_on_whitespace_runs():
    assert [*Tokenizer('  1\t2   +  .\n').tokenize()] == ['1', '2', '+', '.']

def test_tokenize_blank_line():
    assert [*Tokenizer('').tokenize()] == []
    assert [*Tokenizer('   \n').tokenize()] == []

def test_parse_without_definition_passes_tokens_through():
    assert Parser().parse('1 2 + .') == ['1', '2', '+', '.']

def test_parse_folds_definition_span():
    assert Parser().parse(': answer + ;') == [': answer + ;']

def test_parse_keeps_tokens_around_definition():
    tokens = Parser().parse('1 2   :  add3   +   ;  answer .s')
    assert tokens == ['1', '2', ': add3 + ;', 'answer', '.s']

def test_parse_definition_with_empty_body():
    assert Parser().parse(': nothing ;') == [': nothing ;']

@pytest.mark.parametrize('line', [
    ': a : b ;',
    ': a ; ;',
    ': a 1 ; : b 2 ;',
    ': a 1',
    'a 1 ;',
    '; a 1 :',
    ': ;',
])
def test_parse_rejects_malformed_definitions(line):
    with pytest.raises(MalformedDefinition):
        Parser().parse(line)

def test_malformed_definition_is_a_parsing_error():
    with pytest.raises(ParsingError):
        Parser().parse('; ;')

def test_delimiters_must_be_separate_tokens():
    assert Parser().parse(':a b;') == [':a', 'b;']
