import logging
import os
import time

import pytest

from screenshot_beautify.errors import InvalidConfig, InvalidImage, IOFailure
from screenshot_beautify.watcher import (
    DirectoryPoller,
    Job,
    JobResult,
    Watcher,
    WatchStatus,
    is_candidate,
    output_path_for,
    run_job,
)

from .utils import save, solid_image

logger = logging.getLogger(__name__)


class FakeClock(object):
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def _wait_for(predicate, timeout=10.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.02)
    return False


@pytest.mark.parametrize(
    "name, expected",
    [
        ("shot.png", True),
        ("Shot.JPG", True),
        ("shot.jpeg", True),
        ("shot.webp", True),
        ("shot.gif", True),
        ("notes.txt", False),
        (".shot.png", False),
        ("shot_beautified.png", False),
    ],
)
def test_is_candidate(name, expected):
    assert is_candidate(os.path.join("/tmp", name)) is expected


def test_output_path_for():
    assert output_path_for("/a/b/shot.jpg", "/out") == os.path.join(
        "/out", "shot_beautified.png"
    )


def test_poller_waits_for_stable_files(tmpdir):
    clock = FakeClock()
    poller = DirectoryPoller(tmpdir.strpath, stability=0.5, clock=clock)
    save(solid_image(), tmpdir, "existing.png")
    poller.prime()

    path = save(solid_image(), tmpdir, "new.png")
    save(solid_image(), tmpdir, "new_beautified.png")
    tmpdir.join("notes.txt").write("text")
    assert poller.poll() == []

    clock.now = 0.3
    assert poller.poll() == []

    clock.now = 0.6
    assert poller.poll() == [path]

    clock.now = 2.0
    assert poller.poll() == []


def test_poller_restarts_window_on_change(tmpdir):
    clock = FakeClock()
    poller = DirectoryPoller(tmpdir.strpath, stability=0.5, clock=clock)
    poller.prime()

    path = save(solid_image((10, 10)), tmpdir, "growing.png")
    assert poller.poll() == []

    clock.now = 0.4
    save(solid_image((20, 20)), tmpdir, "growing.png")
    assert poller.poll() == []

    clock.now = 0.8
    assert poller.poll() == []

    clock.now = 1.0
    assert poller.poll() == [path]


def test_poller_reports_files_that_come_back(tmpdir):
    clock = FakeClock()
    poller = DirectoryPoller(tmpdir.strpath, stability=0.0, clock=clock)
    poller.prime()

    path = save(solid_image(), tmpdir, "shot.png")
    assert poller.poll() == []
    assert poller.poll() == [path]

    os.unlink(path)
    assert poller.poll() == []
    save(solid_image(), tmpdir, "shot.png")
    assert poller.poll() == []
    assert poller.poll() == [path]


def test_run_job(tmpdir, small_config):
    source = save(solid_image(), tmpdir, "shot.png")
    destination = tmpdir.join("out.png").strpath
    result = run_job(Job(source, destination), small_config)
    assert result.ok
    assert os.path.exists(destination)
    assert os.path.exists(source)


def test_run_job_delete_original(tmpdir, small_config):
    source = save(solid_image(), tmpdir, "shot.png")
    destination = tmpdir.join("out.png").strpath
    result = run_job(Job(source, destination, True), small_config)
    assert result.ok
    assert os.path.exists(destination)
    assert not os.path.exists(source)


def test_run_job_failure_keeps_original(tmpdir, small_config):
    source = tmpdir.join("shot.png")
    source.write_binary(b"not an image")
    destination = tmpdir.join("out.png").strpath
    result = run_job(Job(source.strpath, destination, True), small_config)
    assert not result.ok
    assert isinstance(result.error, InvalidImage)
    assert source.check()
    assert not os.path.exists(destination)


def test_run_job_delete_failure_is_not_fatal(tmpdir, small_config, monkeypatch):
    source = save(solid_image(), tmpdir, "shot.png")
    destination = tmpdir.join("out.png").strpath

    def unlink(path):
        raise PermissionError(path)

    monkeypatch.setattr("screenshot_beautify.watcher.os.unlink", unlink)
    result = run_job(Job(source, destination, True), small_config)
    monkeypatch.undo()
    assert result.ok
    assert os.path.exists(destination)
    assert os.path.exists(source)


def test_watch_status():
    status = WatchStatus()
    job = Job("/tmp/a.png", "/tmp/a_beautified.png")
    status.set_running(True)
    status.record(JobResult(job, True))
    status.record(JobResult(job, False, InvalidImage("broken")))
    snapshot = status.snapshot()
    assert snapshot.running
    assert snapshot.processed == 1
    assert snapshot.failed == 1
    assert snapshot.last_error == "a.png: broken"


def test_watcher(tmpdir, small_config):
    source_dir = tmpdir.mkdir("source")
    output_dir = tmpdir.join("output")
    save(solid_image(), source_dir, "existing.png")

    watcher = Watcher(
        source_dir.strpath,
        output_dir.strpath,
        small_config,
        workers=2,
        stability=0.0,
        interval=0.01,
    )
    watcher.start()
    try:
        assert output_dir.check(dir=True)
        assert watcher.status.snapshot().running

        # Write under a hidden name first so the poller sees a complete file.
        hidden = save(solid_image(), source_dir, ".new.png")
        os.replace(hidden, source_dir.join("new.png").strpath)
        source_dir.join("broken.png").write_binary(b"garbage")

        assert _wait_for(
            lambda: watcher.status.snapshot().processed == 1
            and watcher.status.snapshot().failed == 1
        )
    finally:
        watcher.stop()

    snapshot = watcher.status.snapshot()
    assert not snapshot.running
    assert snapshot.last_error.startswith("broken.png")
    assert sorted(os.listdir(output_dir.strpath)) == ["new_beautified.png"]
    assert source_dir.join("existing.png").check()


def test_watcher_submit(tmpdir, small_config):
    source = save(solid_image(), tmpdir, "shot.png")
    watcher = Watcher(tmpdir.strpath, tmpdir.join("out").strpath, small_config)
    watcher.start()
    try:
        job = watcher.submit(source)
        watcher.join()
    finally:
        watcher.stop()
    assert os.path.exists(job.destination)
    assert watcher.status.snapshot().processed == 1


def test_watcher_missing_source(tmpdir):
    watcher = Watcher(tmpdir.join("missing").strpath, tmpdir.join("out").strpath)
    with pytest.raises(IOFailure):
        watcher.start()


def test_watcher_needs_a_worker(tmpdir):
    with pytest.raises(InvalidConfig):
        Watcher(tmpdir.strpath, tmpdir.strpath, workers=0)
