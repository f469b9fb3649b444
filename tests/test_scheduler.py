import asyncio
import threading

from parceltrack.tasks import scheduler


class RecordingMonitor:
    def __init__(self, error: Exception | None = None):
        self.called = threading.Event()
        self.error = error

    def run_once(self):
        self.called.set()
        if self.error:
            raise self.error
        return []


def test_job_swallows_sweep_failures():
    monitor = RecordingMonitor(error=RuntimeError("boom"))

    asyncio.run(scheduler.delay_check_job(monitor))

    assert monitor.called.is_set()


def test_scheduler_runs_first_check_immediately():
    monitor = RecordingMonitor()

    async def scenario():
        scheduler.start_scheduler(monitor)
        try:
            for _ in range(100):
                if monitor.called.is_set():
                    break
                await asyncio.sleep(0.05)
        finally:
            scheduler.shutdown_scheduler()

    asyncio.run(scenario())

    assert monitor.called.is_set()
    assert scheduler.scheduler is None
