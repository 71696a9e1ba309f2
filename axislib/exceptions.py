"""axislib.exceptions.

Copyright (c) 2025 Will Bickerstaff
Licensed under the MIT License.
See LICENSE file in the root directory of this project.

Description: Program exceptions.
Author: Will Bickerstaff
Version: 0.1
"""


class ExitAfter(Exception):
    """Raised to force a program halt with an exit status."""

    def __init__(self, status: int = 0):
        super().__init__(f"Exit with status {status}")
        self.status = status
