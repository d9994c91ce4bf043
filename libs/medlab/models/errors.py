"""Errors raised while interpreting a turn snapshot."""


class MalformedSnapshot(ValueError):
    """A turn's data cannot be interpreted (unknown token, invalid field).

    The policy never runs on a snapshot that raised this.
    """
