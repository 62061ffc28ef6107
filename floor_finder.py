"""Running floor count over a string of parentheses.

'(' goes up one floor, ')' goes down one, anything else is ignored.
"""

UP = '('
DOWN = ')'


def step(symbol):
    if symbol == UP:
        return 1
    if symbol == DOWN:
        return -1
    return 0


def running_balances(symbols, start=0):
    """Yield the floor after each symbol."""
    floor = start
    for char in symbols:
        floor += step(char)
        yield floor


def final_balance(symbols, start=0):
    """Return the floor after the last symbol.

    Pass the result of a previous call as ``start`` to continue counting
    over the next chunk of the same input.
    """
    floor = start
    for char in symbols:
        floor += step(char)
    return floor


def first_index_at_balance(symbols, target):
    """Return the 1-based step after which the floor first equals target.

    Returns None when the target floor is never reached.
    """
    for i, floor in enumerate(running_balances(symbols), 1):
        if floor == target:
            return i
    return None


def basement_index(symbols):
    return first_index_at_balance(symbols, -1)
