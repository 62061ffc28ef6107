
import sys

from floor_finder import running_balances
from santa_floor import load_directions


def trace_floors(directions, start_step, end_step):
    floor = 0
    for i, (char, floor) in enumerate(zip(directions, running_balances(directions)), 1):
        if start_step <= i <= end_step:
            print(f"S{i} (floor {floor}): {char!r}")
    print(f"Final floor: {floor}")
    return floor


def main(argv=None):
    if argv is None:
        argv = sys.argv
    if len(argv) < 4:
        print("Usage: floor_trace.py <file> <start> <end>")
        return 1
    try:
        start_step, end_step = int(argv[2]), int(argv[3])
    except ValueError:
        print(f"Error: step window must be integers, got {argv[2]!r} {argv[3]!r}")
        return 1
    if start_step < 1 or start_step > end_step:
        print(f"Error: step window must satisfy 1 <= start <= end, got {start_step} {end_step}")
        return 1
    try:
        directions = load_directions(argv[1])
    except FileNotFoundError:
        print(f"Error: {argv[1]} not found")
        return 1
    except OSError as e:
        print(f"Error: cannot read {argv[1]}: {e}")
        return 1

    trace_floors(directions, start_step, end_step)
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
