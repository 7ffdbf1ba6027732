# filename: huffman_config.py

from dataclasses import dataclass

# 0xface8200 | 1, the tree-headed stream tag
HUFF_TREE = 0xFACE8201


@dataclass(frozen=True)
class HuffmanConfig:
    """Widths and tags shared by both directions of the codec."""

    bits_per_word: int = 8
    bits_per_int: int = 32
    magic: int = HUFF_TREE

    def __post_init__(self):
        # a byte-aligned file must split into whole symbols
        if self.bits_per_word not in (1, 2, 4, 8):
            raise ValueError(f"bits_per_word must divide 8, got {self.bits_per_word}")
        if self.bits_per_int <= 0:
            raise ValueError(f"bits_per_int must be positive, got {self.bits_per_int}")
        if not 0 <= self.magic < (1 << self.bits_per_int):
            raise ValueError(f"magic {self.magic:#x} does not fit in {self.bits_per_int} bits")

    @property
    def alphabet_size(self):
        return 1 << self.bits_per_word

    @property
    def pseudo_eof(self):
        return self.alphabet_size

    @property
    def symbol_bits(self):
        # one wider than a word so pseudo_eof fits
        return self.bits_per_word + 1


DEFAULT_CONFIG = HuffmanConfig()
