from typing import Optional, Protocol

import numpy as np

from satiter.satexception import SATResourceException


class Allocator(Protocol):
    """Protocol for the allocators of byte-per-variable buffers.

    A failing allocator either raises MemoryError or returns None.
    """

    def allocate(self, size: int) -> Optional[np.ndarray]: ...

    def reallocate(self, buffer: np.ndarray, size: int) -> Optional[np.ndarray]: ...

    def free(self, buffer: np.ndarray) -> None: ...


class NumpyAllocator:
    """The default allocator, backed by numpy int8 arrays."""

    DTYPE = np.int8

    def allocate(self, size: int) -> np.ndarray:
        return np.zeros(size, dtype=self.DTYPE)

    def reallocate(self, buffer: np.ndarray, size: int) -> np.ndarray:
        grown = np.zeros(size, dtype=self.DTYPE)
        n = min(size, len(buffer))
        grown[:n] = buffer[:n]
        return grown

    def free(self, buffer: np.ndarray) -> None:
        # the array is reclaimed with its last reference
        pass


class ScratchBuffer:
    """A lazily allocated buffer reused across blocking-clause computations.

    The buffer only grows: once it holds N bytes, requests for N bytes or less
    are served without touching the allocator.

    Attributes:
        allocator: the allocator serving the buffer
        buffer: the current array (None before the first request and after release)
    """

    def __init__(self, allocator: Optional[Allocator] = None) -> None:
        self.allocator = allocator if allocator is not None else NumpyAllocator()
        self.buffer: Optional[np.ndarray] = None

    def reserve(self, size: int) -> np.ndarray:
        """Returns a buffer holding at least `size` bytes.

        Raises:
            SATResourceException (SCRATCH_ALLOCATION) if the allocator fails.
        """
        if self.buffer is not None and len(self.buffer) >= size:
            return self.buffer

        try:
            if self.buffer is None:
                buffer = self.allocator.allocate(size)
            else:
                buffer = self.allocator.reallocate(self.buffer, size)
        except MemoryError as e:
            raise SATResourceException(
                SATResourceException.SCRATCH_ALLOCATION, size
            ) from e

        if buffer is None:
            raise SATResourceException(SATResourceException.SCRATCH_ALLOCATION, size)

        self.buffer = buffer
        return buffer

    def release(self) -> None:
        if self.buffer is not None:
            self.allocator.free(self.buffer)
            self.buffer = None

    def __len__(self) -> int:
        return 0 if self.buffer is None else len(self.buffer)
