# filename: huffman_errors.py


class HuffmanError(Exception):
    """Base class for failures while reading a compressed stream."""


class InvalidFormatError(HuffmanError):
    pass


class MalformedHeaderError(HuffmanError):
    pass


class MalformedStreamError(HuffmanError):
    pass
