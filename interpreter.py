''' OKFORTH : a dictionary driven, Forth-like line interpreter '''

import argparse
import sys
from typing import List, Optional, TextIO
import colorama
from colorama import Cursor, Fore as fg

from atoms import Intrinsic, Error, ParsingError
from parsing import Parser
from execution import Runtime, LoopInterrupt
import intrinsics  # ignore 'Unused import' warning, actually usefull

class Interpreter:
    ''' The interpreter program '''

    def __init__(self, color: bool = True, echo: bool = True, trace: bool = False) -> None:
        self.color = color
        self.echo = echo
        self.runtime = Runtime(trace)
        for intrinsic in Intrinsic.classes: intrinsic().register(self.runtime)
        self.parser = Parser()

    def paint(self, text: str, color: str) -> str:
        return color + text + fg.RESET if self.color else text

    def execute(self, line: str) -> Optional[Error]:
        '''
        Parses and evaluates one line. Returns the error that stopped it, if any.
        LoopInterrupt is not an Error and propagates to the caller.
        '''
        try:
            self.runtime.evaluate(self.parser.parse(line))
        except Error as error:
            return error
        return None

    def execute_input(self, line: str) -> None:
        # cursor back up, right after the echoed input
        if self.echo: print(Cursor.UP(1) + Cursor.FORWARD(len(line)), end='')
        error = self.execute(line)
        if error is None: print(self.paint(' ok', fg.GREEN), end='')
        elif not isinstance(error, ParsingError): print(self.paint(error.message, fg.LIGHTRED_EX), end='')
        print()

    def loop(self, stream: Optional[TextIO] = None) -> None:
        if stream is None: stream = sys.stdin
        try:
            for line in stream: self.execute_input(line)
        except LoopInterrupt:
            sys.stdout.flush()
            sys.exit(0)

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='OKFORTH, a dictionary driven Forth-like line interpreter.')
    parser.add_argument('--no-color', dest='color', action='store_false', help='do not colorize feedback')
    parser.add_argument('--no-echo', dest='echo', action='store_false', help='do not move the cursor back next to the typed line')
    parser.add_argument('--trace', action='store_true', help='print how each token is resolved, on stderr')
    return parser.parse_args(argv)

def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    colorama.just_fix_windows_console()
    Interpreter(color=args.color, echo=args.echo, trace=args.trace).loop()

# Main function calling
if __name__ == '__main__':
    main()
