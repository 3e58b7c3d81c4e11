"""
Try out a usage text: parse it, match some arguments and show the result.

    python -m usage_argparser myprog.usage -- -v --lines 10 notes.txt
"""

import sys

from .parser import UsageArgParser, parse_args

USAGE = """
Check a usage text against a command line and dump the flag values
  <spec> (infile)     file holding the usage text ('stdin' to read it from stdin)
  <args>... (string)  arguments to match; put '--' before them if they start with '-'
"""


def main() -> None:
    args = parse_args(USAGE, prog="usage_argparser")
    spec_file = args.get_infile("spec")
    try:
        text = spec_file.read()
    finally:
        if spec_file is not sys.stdin:
            spec_file.close()

    target = UsageArgParser(text, prog=args.get_as("spec", str))
    target.parse(args.get_strings("args"))
    target.dump()


if __name__ == "__main__":
    main()
