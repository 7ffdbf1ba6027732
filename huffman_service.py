# filename: huffman_service.py

import logging
import os
from dataclasses import dataclass

from bit_io import BitInputStream, BitOutputStream
from huffman_config import DEFAULT_CONFIG
from huffman_core import HuffmanLogic
from huffman_errors import HuffmanError, InvalidFormatError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompressionStats:
    bits_read: int
    bits_written: int

    @property
    def bits_saved(self):
        return self.bits_read - self.bits_written


class HuffmanService:
    def __init__(self, config=None):
        self.config = config or DEFAULT_CONFIG
        self.logic = HuffmanLogic(self.config)

    def compress_stream(self, bit_in, bit_out):
        """Write the tag, the tree header and the encoded body of ``bit_in``.

        ``bit_in`` is read twice and must support ``reset``. ``bit_out`` is
        closed on return.
        """
        counts = self.logic.count_frequencies(bit_in)
        root = self.logic.build_tree(counts)
        codes = self.logic.generate_codes(root)

        bit_out.write_bits(self.config.bits_per_int, self.config.magic)
        self.logic.write_header(root, bit_out)

        bit_in.reset()
        self.logic.write_compressed_bits(codes, bit_in, bit_out)
        bit_out.close()

    def decompress_stream(self, bit_in, bit_out):
        magic = bit_in.read_bits(self.config.bits_per_int)
        if magic != self.config.magic:
            raise InvalidFormatError(f"invalid magic number {magic:#x}" if magic >= 0 else "missing magic number")

        root = self.logic.read_header(bit_in)
        self.logic.read_compressed_bits(root, bit_in, bit_out)
        bit_out.close()

    def compress(self, data):
        bit_out = BitOutputStream()
        self.compress_stream(BitInputStream(data), bit_out)
        return bit_out.getvalue()

    def decompress(self, data):
        bit_out = BitOutputStream()
        self.decompress_stream(BitInputStream(data), bit_out)
        return bit_out.getvalue()

    def compress_file(self, src, dst):
        stats = self._run_on_files(self.compress_stream, src, dst)
        logger.info("compressed %s to %s: %d bits saved", src, dst, stats.bits_saved)
        return stats

    def decompress_file(self, src, dst):
        stats = self._run_on_files(self.decompress_stream, src, dst)
        logger.info("decompressed %s to %s: %d bits written", src, dst, stats.bits_written)
        return stats

    def _run_on_files(self, operation, src, dst):
        with BitInputStream.from_path(src) as bit_in, BitOutputStream.from_path(dst) as bit_out:
            try:
                operation(bit_in, bit_out)
            except HuffmanError:
                # a half-written output must not pass for a complete one
                bit_out.close()
                os.remove(dst)
                raise
        return CompressionStats(bit_in.bits_read(), bit_out.bits_written())
