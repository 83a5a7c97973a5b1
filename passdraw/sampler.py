from .random_source import RandomSource, GeneratorError, GeneratorException

# Width of one candidate index in bits. 2**chunk_bits is the largest
# alphabet that can be sampled.
chunk_bits = 7
chunk_mask = (1 << chunk_bits) - 1

word_bytes = 8
chunks_per_word = (word_bytes * 8) // chunk_bits

max_char_range = 1 << chunk_bits

def sample_string(source: RandomSource, length: int, char_range: str) -> str:
    """
    Returns a string of exactly length characters, each drawn uniformly and
    independently from char_range.

    Random 64-bit words are consumed in 7-bit chunks. A chunk is used as
    index into char_range if it is in range and discarded otherwise. Repeated
    characters in char_range count as separate entries and thus carry more
    weight.

    Args:
        source: RandomSource supplying the random words.
        length: Number of characters to return, must be at least 1.
        char_range: Characters to pick from, 1 to 128 entries.
    """
    if length < 1:
        raise GeneratorException(GeneratorError.INVALID_LENGTH)

    range_len = len(char_range)
    if range_len < 1 or range_len > max_char_range:
        raise GeneratorException(GeneratorError.INVALID_CHAR_RANGE)

    out = []
    word = 0
    chunks_left = 0
    while len(out) < length:
        if chunks_left == 0:
            word = int.from_bytes(source.random_bytes(word_bytes), "big")
            chunks_left = chunks_per_word

        idx = word & chunk_mask
        word >>= chunk_bits
        chunks_left -= 1

        if idx < range_len:
            out.append(char_range[idx])

    return "".join(out)
