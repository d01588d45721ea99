"""Command line front end for the array and string puzzles."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence

from algokit.arrays import (
    max_profit,
    max_subarray_sum,
    missing_number,
    move_zeroes,
    remove_duplicates,
    two_sum,
)
from algokit.strings import is_anagram
from algokit.windows import check_subarray_sum, longest_consecutive, subarray_sum_count

_EXAMPLE_NUMBERS = [2, 7, 11, 15]
_EXAMPLE_TARGET = 9
_ANAGRAM_VERDICTS = {True: "Anagram", False: "Not Anagram"}


def _joined(values: Sequence[int]) -> str:
    return " ".join(str(value) for value in values)


def _buy_sell(args: argparse.Namespace) -> list[str]:
    return [f"Maximum Profit: {max_profit(args.numbers)}"]


def _continuous_subarray(args: argparse.Namespace) -> list[str]:
    found = bool(check_subarray_sum(args.numbers, args.k))
    return [str(found)]


def _longest_consecutive(args: argparse.Namespace) -> list[str]:
    return [f"Longest Consecutive Length: {longest_consecutive(args.numbers)}"]


def _max_subarray(args: argparse.Namespace) -> list[str]:
    return [f"Maximum Subarray Sum: {max_subarray_sum(args.numbers)}"]


def _missing_number(args: argparse.Namespace) -> list[str]:
    return [f"Missing number is: {missing_number(args.numbers)}"]


def _move_zeroes(args: argparse.Namespace) -> list[str]:
    nums = list(args.numbers)
    move_zeroes(nums)
    return [f"Array after moving zeroes: {_joined(nums)}"]


def _remove_duplicates(args: argparse.Namespace) -> list[str]:
    nums = list(args.numbers)
    unique = remove_duplicates(nums)
    return [
        f"Unique count: {unique}",
        f"Array after removing duplicates: {_joined(nums[:unique])}",
    ]


def _subarray_sum(args: argparse.Namespace) -> list[str]:
    return [f"Number of subarrays with sum = k: {subarray_sum_count(args.numbers, args.k)}"]


def _two_sum(args: argparse.Namespace) -> list[str]:
    if args.numbers:
        if args.target is None:
            raise ValueError("two-sum needs --target when numbers are given")
        nums, target = args.numbers, args.target
    else:
        nums = _EXAMPLE_NUMBERS
        target = _EXAMPLE_TARGET if args.target is None else args.target
    first, second = two_sum(nums, target) or (-1, -1)
    return [f"Test 1: [{first}, {second}]"]


def _anagram(args: argparse.Namespace) -> list[str]:
    matched = bool(is_anagram(args.first, args.second))
    return [_ANAGRAM_VERDICTS[matched]]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="algokit", description="Run a classic array or string puzzle.")
    commands = parser.add_subparsers(dest="command", required=True)

    simple: list[tuple[str, str, Callable[[argparse.Namespace], list[str]]]] = [
        ("buy-sell", "best profit from one buy and one later sell", _buy_sell),
        ("longest-consecutive", "longest run of consecutive integers", _longest_consecutive),
        ("max-subarray", "largest contiguous subarray sum", _max_subarray),
        ("missing-number", "the missing number of 0..n", _missing_number),
        ("move-zeroes", "move zeroes to the end", _move_zeroes),
        ("remove-duplicates", "compact a sorted list to unique items", _remove_duplicates),
    ]
    for name, help_text, handler in simple:
        command = commands.add_parser(name, help=help_text)
        command.add_argument("numbers", nargs="*", type=int)
        command.set_defaults(handler=handler)

    with_k = [
        ("continuous-subarray", "is there a run of 2+ items summing to a multiple of k", _continuous_subarray),
        ("subarray-sum", "count subarrays summing to k", _subarray_sum),
    ]
    for name, help_text, handler in with_k:
        command = commands.add_parser(name, help=help_text)
        command.add_argument("numbers", nargs="*", type=int)
        command.add_argument("-k", type=int, required=True)
        command.set_defaults(handler=handler)

    pair = commands.add_parser("two-sum", help="indices of two items adding up to a target")
    pair.add_argument("numbers", nargs="*", type=int)
    pair.add_argument("--target", type=int, default=None)
    pair.set_defaults(handler=_two_sum)

    anagram = commands.add_parser("anagram", help="whether two words are anagrams")
    anagram.add_argument("first")
    anagram.add_argument("second")
    anagram.set_defaults(handler=_anagram)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse ``argv``, run the chosen puzzle and print its result."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        lines = args.handler(args)
    except ValueError as exc:
        parser.error(str(exc))
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())