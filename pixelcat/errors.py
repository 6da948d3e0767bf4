from __future__ import annotations


class DecodeError(Exception):
    """Expected, per-file decode failure; the file is skipped."""


class MalformedHeader(DecodeError):
    pass


class InvalidDimensions(DecodeError):
    pass


class NoCompressedStreamsFound(DecodeError):
    pass


class NoValidLayers(DecodeError):
    pass


class DecompressionFailure(DecodeError):
    pass
