import secrets
from enum import Enum
from typing import Callable

class GeneratorError(Enum):
    INVALID_LENGTH = 1
    LENGTH_MISMATCH = 2
    INVALID_CHAR_RANGE = 3
    UNSUPPORTED_ALGORITHM = 4
    INFEASIBLE_CONSTRAINTS = 5
    ATTEMPTS_EXHAUSTED = 6

class GeneratorException(Exception):
    def __init__(self, error: GeneratorError):
        self.error = error

    def __str__(self):
        return str(self.error)


class RandomSource:
    """
    Wraps a cryptographically secure byte reader. All randomness used by
    passdraw flows through a RandomSource.

    The reader is any callable that takes a byte count and returns that many
    random bytes. It defaults to secrets.token_bytes; tests pass in
    deterministic readers instead.
    """

    def __init__(self, read: Callable[[int], bytes] = secrets.token_bytes):
        self.read = read

    def random_bytes(self, n: int) -> bytes:
        if n < 1:
            raise GeneratorException(GeneratorError.INVALID_LENGTH)

        data = self.read(n)
        if len(data) != n:
            raise GeneratorException(GeneratorError.LENGTH_MISMATCH)

        return data

    def rand_num(self, max_exclusive: int) -> int:
        """
        Returns:
            Integer uniformly distributed over [0, max_exclusive).
        """
        if max_exclusive < 1:
            raise GeneratorException(GeneratorError.INVALID_LENGTH)

        nbits = (max_exclusive - 1).bit_length()
        if nbits == 0:
            return 0

        nbytes = (nbits + 7) // 8
        mask = (1 << nbits) - 1

        # Values outside the range are redrawn, never reduced modulo
        # max_exclusive.
        while True:
            value = int.from_bytes(self.random_bytes(nbytes), "big") & mask
            if value < max_exclusive:
                return value

    def coin_flip(self) -> int:
        return self.rand_num(2)

    def coin_flip_bool(self) -> bool:
        return self.coin_flip() == 1
