"""
Directory watching.

New screenshots are discovered by :py:class:`DirectoryPoller`, turned into
:py:class:`Job` records on a queue and composed by a pool of worker threads.
Each job is independent: a failure is logged and counted in
:py:class:`WatchStatus` and never stops the other jobs.

Example::

    from screenshot_beautify.watcher import Watcher

    watcher = Watcher('~/Desktop', '~/Pictures/beautified', delete_original=True)
    watcher.start()
    ...
    watcher.stop()
    print(watcher.status.snapshot())
"""

import logging
import os
import queue
import threading
import time
from typing import Callable, Dict, List, Optional, Tuple

from attrs import define, field

from screenshot_beautify.composite import beautify
from screenshot_beautify.config import CompositionConfig
from screenshot_beautify.constants import BEAUTIFIED_SUFFIX, IMAGE_EXTENSIONS
from screenshot_beautify.errors import BeautifyError, InvalidConfig, IOFailure

logger = logging.getLogger(__name__)

#: Seconds a file must stay unchanged before it is picked up.
STABILITY_THRESHOLD = 0.5
#: Seconds between two directory scans.
POLL_INTERVAL = 0.1


def is_candidate(path: str) -> bool:
    """Tell whether ``path`` looks like a screenshot that still needs work."""
    name = os.path.basename(path)
    if name.startswith("."):
        return False
    if BEAUTIFIED_SUFFIX in name:
        return False
    return os.path.splitext(name)[1].lower() in IMAGE_EXTENSIONS


def output_path_for(source: str, output_dir: str) -> str:
    """``<output_dir>/<stem>_beautified.png``"""
    stem = os.path.splitext(os.path.basename(source))[0]
    return os.path.join(output_dir, "%s%s.png" % (stem, BEAUTIFIED_SUFFIX))


@define(frozen=True)
class Job:
    source: str
    destination: str
    delete_original: bool = False


@define(frozen=True)
class JobResult:
    job: Job
    ok: bool
    error: Optional[BaseException] = field(default=None, eq=False)


@define(frozen=True)
class StatusSnapshot:
    running: bool
    processed: int
    failed: int
    last_error: Optional[str]


class WatchStatus(object):
    """Counters of a watch session.

    Only the workers record results; other threads read a
    :py:class:`StatusSnapshot`.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._running = False
        self._processed = 0
        self._failed = 0
        self._last_error: Optional[str] = None

    def set_running(self, running: bool) -> None:
        with self._lock:
            self._running = running

    def record(self, result: JobResult) -> None:
        with self._lock:
            if result.ok:
                self._processed += 1
            else:
                self._failed += 1
                self._last_error = "%s: %s" % (
                    os.path.basename(result.job.source),
                    result.error,
                )

    def snapshot(self) -> StatusSnapshot:
        with self._lock:
            return StatusSnapshot(
                self._running, self._processed, self._failed, self._last_error
            )


class DirectoryPoller(object):
    """
    Reports files of a directory once they stopped changing.

    A file is reported when its size and modification time stayed the same
    for ``stability`` seconds. Files present when :py:meth:`prime` runs are
    never reported, and a reported file is reported again only after it
    disappeared and came back.
    """

    def __init__(
        self,
        directory: str,
        stability: float = STABILITY_THRESHOLD,
        accept: Callable[[str], bool] = is_candidate,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.directory = directory
        self.stability = stability
        self._accept = accept
        self._clock = clock
        self._seen: set = set()
        self._pending: Dict[str, Tuple[Tuple[int, int], float]] = {}

    def _scan(self) -> Dict[str, Tuple[int, int]]:
        found = {}
        with os.scandir(self.directory) as it:
            for entry in it:
                if not self._accept(entry.path):
                    continue
                try:
                    if not entry.is_file():
                        continue
                    stat = entry.stat()
                except FileNotFoundError:
                    continue
                found[entry.path] = (stat.st_size, stat.st_mtime_ns)
        return found

    def prime(self) -> None:
        """Ignore everything currently in the directory."""
        self._seen = set(self._scan())
        self._pending.clear()

    def poll(self) -> List[str]:
        """Scan once and return the files that became stable."""
        now = self._clock()
        found = self._scan()
        self._seen &= set(found)
        for path in list(self._pending):
            if path not in found:
                del self._pending[path]

        ready = []
        for path, signature in sorted(found.items()):
            if path in self._seen:
                continue
            previous = self._pending.get(path)
            if previous is None or previous[0] != signature:
                self._pending[path] = (signature, now)
                continue
            if now - previous[1] >= self.stability:
                del self._pending[path]
                self._seen.add(path)
                ready.append(path)
        return ready


def run_job(job: Job, config: Optional[CompositionConfig] = None) -> JobResult:
    """Compose one screenshot, then run the post actions.

    The original is deleted only after the output has been written, and a
    failure to delete it does not fail the job.
    """
    logger.info("New screenshot detected: %s" % os.path.basename(job.source))
    try:
        beautify(job.source, job.destination, config)
    except BeautifyError as e:
        logger.error("Failed to beautify %s: %s" % (os.path.basename(job.source), e))
        return JobResult(job, False, e)
    logger.info("Beautified: %s" % os.path.basename(job.destination))

    if job.delete_original:
        try:
            os.unlink(job.source)
            logger.info("Deleted original: %s" % os.path.basename(job.source))
        except OSError as e:
            logger.warning(
                "Could not delete original %s: %s" % (os.path.basename(job.source), e)
            )
    return JobResult(job, True)


_STOP = object()


class Watcher(object):
    """
    Watches ``source_dir`` and writes decorated copies to ``output_dir``.

    One poller thread feeds a queue consumed by ``workers`` threads.
    """

    def __init__(
        self,
        source_dir: str,
        output_dir: str,
        config: Optional[CompositionConfig] = None,
        workers: int = 1,
        delete_original: bool = False,
        stability: float = STABILITY_THRESHOLD,
        interval: float = POLL_INTERVAL,
    ):
        if workers < 1:
            raise InvalidConfig("At least one worker is required, got %d" % workers)
        self.source_dir = os.path.abspath(os.path.expanduser(source_dir))
        self.output_dir = os.path.abspath(os.path.expanduser(output_dir))
        self.config = config or CompositionConfig()
        self.delete_original = delete_original
        self.interval = interval
        self.status = WatchStatus()
        self.poller = DirectoryPoller(self.source_dir, stability)
        self._queue: "queue.Queue" = queue.Queue()
        self._stop_event = threading.Event()
        self._threads: List[threading.Thread] = []
        self._poller_thread: Optional[threading.Thread] = None
        self._workers = workers

    def start(self) -> None:
        if not os.path.isdir(self.source_dir):
            raise IOFailure("Source directory does not exist", self.source_dir)
        if not os.path.isdir(self.output_dir):
            os.makedirs(self.output_dir, exist_ok=True)
            logger.info("Created output directory: %s" % self.output_dir)

        self.poller.prime()
        self._stop_event.clear()
        self.status.set_running(True)
        self._threads = [
            threading.Thread(target=self._work, name="beautify-worker-%d" % i, daemon=True)
            for i in range(self._workers)
        ]
        self._poller_thread = threading.Thread(
            target=self._poll, name="beautify-poller", daemon=True
        )
        for thread in self._threads + [self._poller_thread]:
            thread.start()
        logger.info("Watching for screenshots in: %s" % self.source_dir)

    def stop(self) -> None:
        """Stop discovering files and wait for running jobs to finish."""
        self._stop_event.set()
        if self._poller_thread is not None:
            self._poller_thread.join()
            self._poller_thread = None
        for _ in range(self._workers):
            self._queue.put(_STOP)
        for thread in self._threads:
            thread.join()
        self._threads = []
        self.status.set_running(False)
        logger.info("Stopped watching %s" % self.source_dir)

    def submit(self, path: str) -> Job:
        job = Job(path, output_path_for(path, self.output_dir), self.delete_original)
        self._queue.put(job)
        return job

    def join(self) -> None:
        """Block until every submitted job has been processed."""
        self._queue.join()

    def _poll(self) -> None:
        while not self._stop_event.is_set():
            try:
                for path in self.poller.poll():
                    self.submit(path)
            except OSError as e:
                logger.error("Watcher error: %s" % e)
            self._stop_event.wait(self.interval)

    def _work(self) -> None:
        while True:
            job = self._queue.get()
            try:
                if job is _STOP:
                    return
                try:
                    result = run_job(job, self.config)
                except Exception as e:
                    logger.exception("Unexpected failure on %s" % job.source)
                    result = JobResult(job, False, e)
                self.status.record(result)
            finally:
                self._queue.task_done()
