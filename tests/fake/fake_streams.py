class TrickleSource:
    """Source handing out at most `step` bytes per read."""

    def __init__(self, data: bytes, step: int = 1) -> None:
        self._data = data
        self._pos = 0
        self._step = step
        self.calls = 0

    def read(self, size: int) -> bytes:
        self.calls += 1
        n = min(size, self._step)
        chunk = self._data[self._pos:self._pos + n]
        self._pos += len(chunk)
        return chunk
