"""
SciCalc Scientific Calculator
Main application entry point
"""
import argparse
import sys

import config
import keypad
from calculator import Calculator


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog='scicalc',
        description=f'{config.APP_NAME}: press calculator buttons from the command line.'
    )
    parser.add_argument('buttons', nargs='*',
                        help='button tokens to press in order, e.g. 5 + 3 = '
                             '(reads tokens from stdin when none are given)')
    parser.add_argument('--web', action='store_true',
                        help=f'start the web API on {config.WEB_HOST}:{config.WEB_PORT}')
    parser.add_argument('--version', action='version',
                        version=f'%(prog)s {config.VERSION}')
    return parser.parse_args(argv)


def run_buttons(calc, buttons):
    """Press every button; True if all of them were accepted"""
    ok = True
    for button in buttons:
        if not keypad.press(calc, button):
            ok = False
    return ok


def run_tape(calc, stream):
    """Read whitespace separated buttons line by line, echoing the display"""
    ok = True
    for line in stream:
        buttons = line.split()
        if not buttons:
            continue
        if not run_buttons(calc, buttons):
            ok = False
        print(calc.display)
    return ok


def main(argv=None):
    args = parse_args(argv)

    if args.web:
        import api
        api.run()
        return 0

    calc = Calculator()
    if args.buttons:
        ok = run_buttons(calc, args.buttons)
        print(calc.display)
    else:
        ok = run_tape(calc, sys.stdin)
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
