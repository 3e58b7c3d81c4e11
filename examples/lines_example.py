#!/usr/bin/env python3
"""
Copy the first lines of a file, using infile/outfile flags.

    python lines_example.py --lines 3 notes.txt head.txt
    cat notes.txt | python lines_example.py -n 3
"""

from usage_argparser import parse_args

USAGE = """
Prints out first n lines of a file
  -n, --lines (default 10)  number of lines
  -v, --verbose
  <in> (default stdin)      input file
  <out> (default stdout)    output file
"""


def main() -> None:
    args = parse_args(USAGE)
    n = args.get_integer("lines")
    if n < 1:
        args.quit("lines must be greater than zero")
    verbose = args.get_bool("verbose")

    inf = args.get_infile("in")
    out = args.get_outfile("out")
    for count, line in enumerate(inf, start=1):
        if verbose:
            line = f"{count}: {line}"
        out.write(line)
        if count == n:
            break
    out.flush()


if __name__ == "__main__":
    main()
