# filename: bit_io.py

import io


class BitInputStream:
    """Reads groups of bits, most significant bit first, from a byte source.

    ``source`` is either a bytes-like object or a binary file object. Reading
    starts at the source's current offset, which is also where ``reset``
    rewinds to.
    """

    def __init__(self, source, chunk_size=4096):
        if isinstance(source, (bytes, bytearray, memoryview)):
            source = io.BytesIO(bytes(source))
        self.stream = source
        self.chunk_size = chunk_size
        self._owns_stream = False
        self._start = source.tell() if source.seekable() else None
        self._clear()

    @classmethod
    def from_path(cls, path, chunk_size=4096):
        bit_in = cls(open(path, "rb"), chunk_size)
        bit_in._owns_stream = True
        return bit_in

    def _clear(self):
        self.chunk = b""
        self.pos = 0
        self.acc = 0
        self.bits = 0
        self.count = 0

    def read_bits(self, how_many):
        """Return the next ``how_many`` bits as an int, or -1 if too few remain."""
        while self.bits < how_many:
            if self.pos >= len(self.chunk):
                self.chunk = self.stream.read(self.chunk_size)
                self.pos = 0
                if not self.chunk:
                    return -1
            self.acc = (self.acc << 8) | self.chunk[self.pos]
            self.pos += 1
            self.bits += 8

        self.bits -= how_many
        value = self.acc >> self.bits
        self.acc &= (1 << self.bits) - 1
        self.count += how_many
        return value

    def bits_read(self):
        return self.count

    def reset(self):
        if self._start is None:
            raise io.UnsupportedOperation("bit source cannot be rewound")
        self.stream.seek(self._start)
        self._clear()

    def close(self):
        if self._owns_stream:
            self.stream.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


class BitOutputStream:
    """Packs groups of bits, most significant bit first, into a byte sink.

    Without a sink the stream writes into its own ``io.BytesIO``, whose
    contents ``getvalue`` returns. ``close`` must be called so the last
    partial byte is zero-padded and written.
    """

    FLUSH_SIZE = 4096

    def __init__(self, sink=None):
        self._owns_buffer = sink is None
        self._owns_stream = False
        self.stream = io.BytesIO() if sink is None else sink
        self.buf = bytearray()
        self.acc = 0
        self.bits = 0
        self.count = 0
        self.closed = False

    @classmethod
    def from_path(cls, path):
        bit_out = cls(open(path, "wb"))
        bit_out._owns_stream = True
        return bit_out

    def write_bits(self, how_many, value):
        if self.closed:
            raise ValueError("write to closed bit stream")
        if how_many < 0:
            raise ValueError(f"cannot write {how_many} bits")

        self.acc = (self.acc << how_many) | (value & ((1 << how_many) - 1))
        self.bits += how_many
        self.count += how_many
        while self.bits >= 8:
            self.bits -= 8
            self.buf.append((self.acc >> self.bits) & 0xFF)
        self.acc &= (1 << self.bits) - 1

        if len(self.buf) >= self.FLUSH_SIZE:
            self._flush()

    def bits_written(self):
        return self.count

    def _flush(self):
        self.stream.write(bytes(self.buf))
        self.buf.clear()

    def close(self):
        if self.closed:
            return
        if self.bits > 0:
            self.buf.append((self.acc << (8 - self.bits)) & 0xFF)
            self.acc = 0
            self.bits = 0
        self._flush()
        self.stream.flush()
        self.closed = True
        if self._owns_stream:
            self.stream.close()

    def getvalue(self):
        if not self._owns_buffer:
            raise ValueError("bit stream writes to a caller-supplied sink")
        return self.stream.getvalue()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
