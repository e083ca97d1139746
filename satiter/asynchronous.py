import queue
import threading
from typing import Iterator

from satiter.iterator import SolutionIterator


class AsyncWrapper:
    """This class implements a wrapper around a SolutionIterator.
    The enclosed iterator runs on a separate thread, so that the engine searches
    proceed while the caller processes the models already found.

    Attributes:
        iterator: the enclosed SolutionIterator, owned by the wrapper
        max_queue_size: maximum number of models found ahead of the caller (0 for no limit)
    """

    def __init__(self, iterator: SolutionIterator, max_queue_size: int = 0) -> None:
        """Default constructor.

        Args:
            iterator: the enclosed SolutionIterator
            max_queue_size: maximum number of models found ahead of the caller
        """
        self.iterator = iterator
        self.max_queue_size = max_queue_size

    def __iter__(self) -> Iterator[list[int]]:
        """Yields the models of the enclosed iterator, in the order it finds them.

        Exceptions raised on the worker thread are re-raised here. If the caller
        stops early, the worker is stopped and the enclosed iterator closed.
        """
        q: queue.Queue = queue.Queue(maxsize=self.max_queue_size)
        stop_token = object()
        error_token = object()

        # Thread control
        thread_stop_event = threading.Event()

        def run() -> None:
            try:
                for solution in self.iterator:
                    q.put(solution)
                    if thread_stop_event.is_set():
                        break
                q.put(stop_token)
            except Exception as e:
                q.put((error_token, e))

        t = threading.Thread(target=run, daemon=True)
        t.start()

        try:
            while True:
                item = q.get()
                if item is stop_token:
                    break
                elif isinstance(item, tuple) and item[0] is error_token:
                    raise item[1]  # Re-raise the exception from the thread
                else:
                    yield item
        finally:
            if t.is_alive():
                thread_stop_event.set()
                # unblock a worker waiting on a full queue
                while t.is_alive():
                    try:
                        q.get(timeout=0.05)
                    except queue.Empty:
                        pass
                t.join()
            self.iterator.close()
