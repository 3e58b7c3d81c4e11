#!/usr/bin/env python3
"""
Example script demonstrating the usage of UsageArgParser.

The usage text below is both the program's help message and the
declaration of its flags. Try:

    python basic_example.py -v --lines 5 -I. -Ilib a.txt b.txt
    python basic_example.py --help
"""

from usage_argparser import parse_args

USAGE = """
Basic example of declaring flags with usage text
  -v, --verbose          verbose output
  -k                     an arbitrary flag
  -n, --lines (1..100 default 10)  number of lines to show
  -s, --scale (float default 1.0)  scale factor
  -p (integer...)        several integers, e.g. -p '10 20 30'
  -I, --include... (string)  directories to search (repeatable)
  <files>... (string)    files to process
"""


def main() -> None:
    """Main function demonstrating the parser."""
    args = parse_args(USAGE)

    lines = args.get_integer("lines")
    if args.get_bool("k") and lines < 5:
        args.quit("-k needs at least 5 lines")

    print("Parsed Flags:")
    print("-" * 30)
    print(f"Verbose: {args.get_bool('verbose')}")
    print(f"Lines: {lines}")
    print(f"Scale: {args.get_float('scale')}")
    print(f"Integers: {args.get_integers('p')}")
    print(f"Include: {args.get_strings('include')}")
    print(f"Files: {args.get_strings('files')}")


if __name__ == "__main__":
    main()
