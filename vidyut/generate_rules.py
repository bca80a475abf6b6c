"""Write the generated sandhi rules to standard output as CSV."""

from __future__ import annotations

import csv
import sys
from collections.abc import Iterable, Sequence
from typing import TextIO

from vidyut.sandhi_generator import Rule, generate_rules


def write_rules(rules: Iterable[Rule], stream: TextIO) -> None:
    """Write `rules` to `stream` as CSV with a `first,second,result` header."""
    writer = csv.writer(stream, lineterminator="\n")
    writer.writerow(["first", "second", "result"])
    writer.writerows((r.first, r.second, r.result) for r in rules)
    stream.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Generate the sandhi rules and print them; return an exit status."""
    rules = generate_rules()
    try:
        write_rules(rules, sys.stdout)
    except OSError as err:
        print(err, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())