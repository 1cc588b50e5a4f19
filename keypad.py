"""
Button harness for SciCalc
Maps button tokens ("5", "+", "x!", "MR", ...) onto Calculator operations
"""
import config
from calculator import DIGITS, InvalidDisplay

# token -> (Calculator method name, args)
ACTIONS = {
    '.': ('enter_decimal_point', ()),
    '-/+': ('toggle_sign', ()),
    '+/-': ('toggle_sign', ()),
    '+': ('set_operator', ('+',)),
    '-': ('set_operator', ('-',)),
    '*': ('set_operator', ('*',)),
    '/': ('set_operator', ('/',)),
    '**': ('set_operator', ('**',)),
    'x^y': ('set_operator', ('**',)),
    '=': ('evaluate_equals', ()),
    'x!': ('factorial', ()),
    'log': ('natural_log', ()),
    '1/x': ('reciprocal', ()),
    'sqr': ('square_root', ()),
    'AC': ('all_clear', ()),
    'MC': ('memory_clear', ()),
    'M+': ('memory_add', ()),
    'M-': ('memory_subtract', ()),
    'MR': ('memory_recall', ()),
}

BUTTONS = list(DIGITS) + list(ACTIONS) + ['txt']


def report(calc):
    """Print the current display value"""
    print(f"{config.RESULT_PREFIX}{calc.display}")


def press(calc, token):
    """Press one button. Returns False when the token was rejected."""
    if isinstance(token, str) and len(token) == 1 and token in DIGITS:
        calc.enter_digit(token)
        return True
    if token == 'txt':
        report(calc)
        return True
    if token not in ACTIONS:
        print(config.INVALID_INPUT)
        return False

    method, args = ACTIONS[token]
    try:
        getattr(calc, method)(*args)
    except InvalidDisplay:
        print(f"{config.INVALID_DISPLAY}: {calc.display!r}")
        return False
    return True


def press_sequence(calc, tokens):
    """Press tokens in order and return the final display"""
    for token in tokens:
        press(calc, token)
    return calc.display
