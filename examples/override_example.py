#!/usr/bin/env python3
"""
Example demonstrating config file override functionality.

Values in a config file fill in flags the command line did not give:
1. Command-line arguments (highest priority)
2. Config file values
3. Defaults from the usage text (lowest priority)

    echo 'threshold: 0.5' > settings.yaml
    python override_example.py --config settings.yaml --start 2024-03-01
"""

import sys
from datetime import date

from usage_argparser import ExitPolicy, UsageArgParser

USAGE = """
Override example
  -c, --config (string default '')  YAML or JSON file with flag values
  -t, --threshold (float default 0.1)
  --start (date)                    first day to include
  --tag... (string)                 labels, repeatable
"""


def config_path(argv):
    """Find --config first, so its values can feed the real parse."""
    probe = UsageArgParser(USAGE, on_error=ExitPolicy.RAISE, custom_types=["date"])
    result = probe.safe_parse(argv)
    if result.is_err():
        return None
    return probe.get_string("config") or None


if __name__ == "__main__":
    argv = sys.argv[1:]
    parser = UsageArgParser(USAGE, custom_types=["date"])
    parser.parse(argv, config=config_path(argv))

    print("Results:")
    print("-" * 20)
    print(f"threshold: {parser.get_float('threshold')}")
    print(f"start: {parser.get_as('start', date.fromisoformat)}")
    print(f"tags: {parser.get_strings('tag')}")
