import logging

from .random_source import RandomSource, GeneratorError, GeneratorException
from .sampler import sample_string
from .charsets import compose_char_range, count_class
from .config import GenerationConfig, Algorithm

logger = logging.getLogger(__name__)

class PasswordGenerator:
    """
    Generates passwords using cryptographically strong randomness.

    A PasswordGenerator holds one GenerationConfig and the RandomSource it
    draws from. It keeps no other state, so one instance can serve any
    number of generate() calls.
    """
    def __init__(self, config: GenerationConfig, source: RandomSource = None):
        self.config = config
        if source is None:
            source = RandomSource()
        self.source = source

    def longest_length(self) -> int:
        cfg = self.config
        if cfg.fixed_length > 0:
            return cfg.fixed_length
        return max(cfg.min_length, cfg.max_length, 1)

    def required_length(self) -> int:
        return sum(self.config.minimums().values())

    def resolve_length(self) -> int:
        """
        Returns:
            fixed_length if set, else a length drawn uniformly between
            min_length and max_length (inclusive, in either order). Lengths
            too short to hold all configured minimums are left out of the
            draw. Never less than 1.
        """
        cfg = self.config
        if cfg.fixed_length > 0:
            return cfg.fixed_length

        lo = min(cfg.min_length, cfg.max_length)
        hi = max(cfg.min_length, cfg.max_length)
        required = self.required_length()
        if 0 < required <= hi and lo < required:
            lo = required
        length = lo + self.source.rand_num(hi - lo + 1)
        if length <= 0:
            return 1
        return length

    def char_range(self) -> str:
        return compose_char_range(self.config.modes, self.config.human_readable)

    def meets_minimums(self, candidate: str) -> bool:
        human_readable = self.config.human_readable
        for cls, minimum in self.config.minimums().items():
            if minimum > 0 and count_class(candidate, cls, human_readable) < minimum:
                return False
        return True

    def check_feasible(self):
        """
        Raises GeneratorException(INFEASIBLE_CONSTRAINTS) if no password of
        any allowed length can satisfy the configured minimums.
        """
        for cls, minimum in self.config.minimums().items():
            if minimum > 0 and cls not in self.config.modes:
                logger.debug("Minimum for %s set, but class is disabled.", cls.label)
                raise GeneratorException(GeneratorError.INFEASIBLE_CONSTRAINTS)

        longest = self.longest_length()
        if self.required_length() > longest:
            logger.debug("Minimums add up to more than %d characters.", longest)
            raise GeneratorException(GeneratorError.INFEASIBLE_CONSTRAINTS)

    def generate(self) -> str:
        """
        Returns:
            Generated password string, or "Heads"/"Tails" for the coin flip
            algorithm.
        """
        algorithm = self.config.algorithm
        if algorithm == Algorithm.COIN_FLIP:
            return self.generate_coin_flip()
        elif algorithm == Algorithm.RANDOM_PASSWORD:
            return self.generate_random()
        else:
            raise GeneratorException(GeneratorError.UNSUPPORTED_ALGORITHM)

    def generate_many(self, count: int) -> list[str]:
        if count < 1:
            raise GeneratorException(GeneratorError.INVALID_LENGTH)
        return [self.generate() for i in range(count)]

    def generate_coin_flip(self) -> str:
        if self.source.coin_flip_bool():
            return "Heads"
        else:
            return "Tails"

    def generate_random(self) -> str:
        char_range = self.char_range()
        if len(char_range) == 0:
            raise GeneratorException(GeneratorError.INVALID_CHAR_RANGE)

        self.check_feasible()
        length = self.resolve_length()
        logger.debug("Generating %d characters from an alphabet of %d.",
            length, len(char_range))

        for attempt in range(1, self.config.max_attempts+1):
            pw = sample_string(self.source, length, char_range)
            if self.meets_minimums(pw):
                logger.debug("Candidate accepted after %d attempt(s).", attempt)
                return pw

        logger.debug("No candidate met the minimums in %d attempts.",
            self.config.max_attempts)
        raise GeneratorException(GeneratorError.ATTEMPTS_EXHAUSTED)
