import sys

from floor_finder import final_balance, first_index_at_balance

DEFAULT_INPUT = "santa_input.txt"


def load_directions(path):
    # Undecodable bytes become U+FFFD, which the scanner ignores
    with open(path, 'r', encoding='utf-8', errors='replace') as f:
        return f.read()


def report(directions, target=None):
    lines = [f"You are at floor {final_balance(directions)}"]
    if target is not None:
        index = first_index_at_balance(directions, target)
        if index is None:
            lines.append(f"Floor {target} never reached")
        else:
            lines.append(f"Floor {target} first reached at step {index}")
    return lines


def main(argv=None):
    if argv is None:
        argv = sys.argv
    path = argv[1] if len(argv) > 1 else DEFAULT_INPUT

    target = None
    if len(argv) > 2:
        try:
            target = int(argv[2])
        except ValueError:
            print(f"Error: target floor must be an integer, got {argv[2]!r}")
            return 1

    try:
        directions = load_directions(path)
    except FileNotFoundError:
        print(f"Error: {path} not found")
        return 1
    except OSError as e:
        print(f"Error: cannot read {path}: {e}")
        return 1

    for line in report(directions, target):
        print(line)
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
