import asyncio
import logging
from datetime import datetime, timezone

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from parceltrack.config import settings
from parceltrack.services.delay_monitor import DelayMonitor

logger = logging.getLogger(__name__)

scheduler: AsyncIOScheduler | None = None


async def delay_check_job(monitor: DelayMonitor):
    """Job to escalate overdue parcels."""
    logger.info("Starting delay check job")
    try:
        escalated = await asyncio.to_thread(monitor.run_once)
        logger.info(f"Delay check complete: {len(escalated)} parcel(s) escalated")
    except Exception as e:
        logger.error(f"Delay check failed: {e}")


def start_scheduler(monitor: DelayMonitor):
    """Start the background scheduler, running the first check immediately."""
    global scheduler
    scheduler = AsyncIOScheduler()
    scheduler.add_job(
        delay_check_job,
        trigger=IntervalTrigger(seconds=settings.delay_check_interval_seconds),
        args=[monitor],
        id="delay_check",
        name="Escalate overdue parcels",
        next_run_time=datetime.now(timezone.utc),
        replace_existing=True,
        max_instances=1,
        coalesce=True,
    )
    scheduler.start()
    logger.info("Scheduler started")


def shutdown_scheduler():
    """Shutdown the scheduler."""
    global scheduler
    if scheduler is None:
        return
    scheduler.shutdown(wait=False)
    scheduler = None
    logger.info("Scheduler shutdown")
