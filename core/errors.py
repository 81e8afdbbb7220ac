"""
Error types raised by the Fibonacci core.

Core code only raises these; printing the message and choosing an exit
code is left to the command line shell.
"""

from typing import Iterable


class FibonacciError(Exception):
    """Base class for every error reported by FibBench"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidAlgorithmVersion(FibonacciError):
    def __init__(self, version, valid_versions: Iterable[int] = (1, 2, 3, 4)):
        self.version = version
        self.valid_versions = list(valid_versions)
        valid = ", ".join(str(v) for v in self.valid_versions)
        super().__init__(
            f"Error: '{version}' is not a valid algorithm number\n"
            f"Valid numbers are [{valid}]"
        )


class InvalidArgumentFormat(FibonacciError):
    def __init__(self, name: str, value):
        self.name = name
        self.value = value
        super().__init__(f"Error: '{name}' must be an integer (got {value!r})")


class NegativeIndex(FibonacciError):
    def __init__(self, n):
        self.n = n
        super().__init__("Error: 'n' must be a non-negative integer")


class OutputWriteFailure(FibonacciError):
    def __init__(self, path, reason: str = ""):
        self.path = str(path)
        self.reason = reason
        super().__init__("Error: Output could not be written to file")


class ClosedFormOverflow(FibonacciError):
    """phi ** n left the double precision range"""

    def __init__(self, n: int):
        self.n = n
        super().__init__(
            f"Error: closed-form approximation overflows double precision for n={n}"
        )


class RecursionDepthExceeded(FibonacciError):
    """Naive recursion went deeper than the interpreter allows"""

    def __init__(self, n: int):
        self.n = n
        super().__init__(
            f"Error: recursive algorithm exceeds the maximum recursion depth for n={n}"
        )
