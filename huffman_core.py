# filename: huffman_core.py

import heapq
import logging
from collections import Counter

from huffman_config import DEFAULT_CONFIG
from huffman_errors import MalformedHeaderError, MalformedStreamError

logger = logging.getLogger(__name__)


class HuffmanNode:
    is_leaf = False

    def __init__(self, weight, order=0):
        self.weight = weight
        # creation counter, breaks ties between equal weights
        self.order = order

    def __lt__(self, other):
        return (self.weight, self.order) < (other.weight, other.order)


class HuffmanLeaf(HuffmanNode):
    is_leaf = True

    def __init__(self, symbol, weight=0, order=0):
        super().__init__(weight, order)
        self.symbol = symbol

    def __repr__(self):
        return f"HuffmanLeaf({self.symbol}, {self.weight})"


class HuffmanInternal(HuffmanNode):
    def __init__(self, left, right, weight=0, order=0):
        super().__init__(weight, order)
        self.left = left
        self.right = right

    def __repr__(self):
        return f"HuffmanInternal({self.left!r}, {self.right!r}, {self.weight})"


class HuffmanLogic:
    """Tree-headed Huffman coding over bit streams.

    Every method works on ``bit_io`` streams (or anything with the same
    ``read_bits``/``write_bits`` contract) and takes its widths from
    ``config``.
    """

    def __init__(self, config=None):
        self.config = config or DEFAULT_CONFIG

    def count_frequencies(self, bit_in):
        # pseudo_eof always occurs exactly once
        counts = Counter({self.config.pseudo_eof: 1})
        while True:
            chunk = bit_in.read_bits(self.config.bits_per_word)
            if chunk == -1:
                break
            counts[chunk] += 1
        return counts

    def build_tree(self, counts):
        """Greedily merge the two lightest nodes until one root is left.

        Ties on weight go to the node created first; leaves are created in
        ascending symbol order, merged nodes after them as they appear.
        The first node popped becomes the left child.
        """
        priority_queue = []
        order = 0
        for symbol in sorted(counts):
            if counts[symbol] > 0:
                priority_queue.append(HuffmanLeaf(symbol, counts[symbol], order))
                order += 1
        if not priority_queue:
            raise ValueError("cannot build a Huffman tree without symbols")
        leaves = len(priority_queue)
        heapq.heapify(priority_queue)

        while len(priority_queue) > 1:
            left = heapq.heappop(priority_queue)
            right = heapq.heappop(priority_queue)
            merged = HuffmanInternal(left, right, left.weight + right.weight, order)
            order += 1
            heapq.heappush(priority_queue, merged)

        root = priority_queue[0]
        logger.debug("built tree over %d symbols, total weight %d", leaves, root.weight)
        return root

    def generate_codes(self, root):
        codes = {}
        if root.is_leaf:
            # lone leaf still needs a bit to be decodable
            codes[root.symbol] = "0"
        else:
            self._generate_codes(root, "", codes)

        if logger.isEnabledFor(logging.DEBUG):
            for symbol in sorted(codes):
                logger.debug("code %d: %s", symbol, codes[symbol])
        return codes

    def _generate_codes(self, node, current_code, codes):
        if node.is_leaf:
            codes[node.symbol] = current_code
            return
        self._generate_codes(node.left, current_code + "0", codes)
        self._generate_codes(node.right, current_code + "1", codes)

    def write_header(self, root, bit_out):
        if root.is_leaf:
            bit_out.write_bits(1, 1)
            bit_out.write_bits(self.config.symbol_bits, root.symbol)
        else:
            bit_out.write_bits(1, 0)
            self.write_header(root.left, bit_out)
            self.write_header(root.right, bit_out)

    def read_header(self, bit_in):
        return self._read_header(bit_in, 0)

    def _read_header(self, bit_in, depth):
        bit = bit_in.read_bits(1)
        if bit == -1:
            raise MalformedHeaderError("bit stream ended inside the tree header")

        if bit == 0:
            # no tree this codec writes is deeper than the alphabet
            if depth >= self.config.alphabet_size:
                raise MalformedHeaderError(f"tree header nests deeper than {depth} levels")
            left = self._read_header(bit_in, depth + 1)
            right = self._read_header(bit_in, depth + 1)
            return HuffmanInternal(left, right)

        symbol = bit_in.read_bits(self.config.symbol_bits)
        if symbol == -1:
            raise MalformedHeaderError("bit stream ended inside a leaf value")
        if symbol > self.config.pseudo_eof:
            raise MalformedHeaderError(f"leaf value {symbol} is outside the alphabet")
        return HuffmanLeaf(symbol)

    def write_compressed_bits(self, codes, bit_in, bit_out):
        # int(code, 2) once per symbol, not once per occurrence
        packed = {symbol: (len(code), int(code, 2)) for symbol, code in codes.items()}
        while True:
            chunk = bit_in.read_bits(self.config.bits_per_word)
            if chunk == -1:
                break
            bit_out.write_bits(*packed[chunk])
        bit_out.write_bits(*packed[self.config.pseudo_eof])

    def read_compressed_bits(self, root, bit_in, bit_out):
        pseudo_eof = self.config.pseudo_eof
        bits_per_word = self.config.bits_per_word
        current = root
        while True:
            bit = bit_in.read_bits(1)
            if bit == -1:
                raise MalformedStreamError("bit stream ended before the end-of-stream code")

            if not current.is_leaf:
                current = current.right if bit else current.left

            if current.is_leaf:
                if current.symbol == pseudo_eof:
                    return
                bit_out.write_bits(bits_per_word, current.symbol)
                current = root
