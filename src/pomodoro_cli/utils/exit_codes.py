"""
Exit codes for pomodoro-cli.

Semantic exit codes so scripts wrapping the timer can tell a clean finish
(or a Ctrl+C) apart from a configuration mistake.
"""

# Success, including a stop requested by the user
SUCCESS = 0

# Invalid arguments or configuration; click uses the same code for usage errors
ERROR_INVALID_ARGS = 2
