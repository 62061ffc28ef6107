"""Time a few equivalent ways of counting the floor.

Only ``scan`` is the real implementation; the others are kept as
comparison points and must agree with it.
"""
import re
import sys
import time
from functools import reduce

from floor_finder import UP, DOWN, final_balance, step
from santa_floor import DEFAULT_INPUT, load_directions

UP_RE = re.compile(re.escape(UP))
DOWN_RE = re.compile(re.escape(DOWN))


def floor_by_reduce(data):
    return reduce(lambda floor, char: floor + step(char), data, 0)


def floor_by_count(data):
    return data.count(UP) - data.count(DOWN)


def floor_by_regex(data):
    # Walks the string twice
    return len(UP_RE.findall(data)) - len(DOWN_RE.findall(data))


STRATEGIES = {
    'scan': final_balance,
    'reduce': floor_by_reduce,
    'count': floor_by_count,
    'regex': floor_by_regex,
}


def time_strategy(func, data, repeat=1):
    start = time.perf_counter()
    for _ in range(repeat):
        result = func(data)
    elapsed = (time.perf_counter() - start) * 1000
    return result, elapsed


def run(data, repeat=1):
    expected = final_balance(data)
    results = []
    for name, func in STRATEGIES.items():
        result, elapsed = time_strategy(func, data, repeat)
        if result != expected:
            raise ValueError(f"{name} gave floor {result}, expected {expected}")
        results.append((name, result, elapsed))
    return results


def main(argv=None):
    if argv is None:
        argv = sys.argv
    path = argv[1] if len(argv) > 1 else DEFAULT_INPUT
    try:
        repeat = int(argv[2]) if len(argv) > 2 else 100
    except ValueError:
        print(f"Error: repeat must be an integer, got {argv[2]!r}")
        return 1
    if repeat < 1:
        print(f"Error: repeat must be at least 1, got {repeat}")
        return 1
    try:
        data = load_directions(path)
    except FileNotFoundError:
        print(f"Error: {path} not found")
        return 1
    except OSError as e:
        print(f"Error: cannot read {path}: {e}")
        return 1

    for name, result, elapsed in run(data, repeat):
        print(f"{name:<9} floor {result:<5} {elapsed:8.3f} ms")
    return 0


def run_cli():
    sys.exit(main())


if __name__ == "__main__":
    run_cli()
