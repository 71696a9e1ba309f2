"""coordtool.

Copyright (c) 2025 Will Bickerstaff
Licensed under the MIT License.
See LICENSE file in the root directory of this project.

Description: Normalize latitude and longitude values from the command line.
Author: Will Bickerstaff
Version: 0.1
"""

import logging
import sys
from typing import List, Optional
from axislib.cli import parse_args, arg_handler
from axislib.common import init_log
from axislib.config import ConfigLoader, ConfigNotLoaded
from axislib.exceptions import ExitAfter


def main(argv: Optional[List[str]] = None) -> int:
    """Parse the command line, normalize each value and return the status."""
    args = parse_args(argv)
    try:
        ConfigLoader(args.config)
    except ConfigNotLoaded as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    init_log(args.log_level, force=True)
    try:
        arg_handler(args)
    except ExitAfter as e:
        logging.info("Exiting with status %s", e.status)
        return e.status
    return 0


if __name__ == "__main__":
    sys.exit(main())
