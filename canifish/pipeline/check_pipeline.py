"""Check pipeline: fetch, evaluate, summarize, and decide on delivery."""

import logging
import time
import uuid
from datetime import datetime

from canifish.config.defaults import DEFAULT_LOCATION
from canifish.config.loader import config_hash
from canifish.config.schema import CanIFishConfig
from canifish.evaluation.window_builder import WindowBuilder
from canifish.ingest.forecast_fetcher import ForecastFetcher
from canifish.models.common import local_now
from canifish.models.forecast import RawForecastBundle
from canifish.models.reporting import CheckResult, DeliveryDecision
from canifish.models.window import FishingWindow
from canifish.reporting.delivery import decide_delivery
from canifish.reporting.formatters import (
    format_report_text,
    format_subject,
    format_summary_text,
)
from canifish.reporting.run_summarizer import RunSummarizer

logger = logging.getLogger(__name__)


class CheckPipeline:
    def __init__(
        self,
        config: CanIFishConfig,
        fetcher: ForecastFetcher | None = None,
        now: datetime | None = None,
    ):
        self.config = config
        self.fetcher = fetcher
        self.now = now
        self.location = config.location or DEFAULT_LOCATION

    def run(self) -> CheckResult:
        """Fetch the forecast for the configured location and evaluate it."""
        if self.fetcher is None:
            raise ValueError("CheckPipeline.run() requires a ForecastFetcher")

        start_time = time.monotonic()
        summarizer = self._start()
        try:
            logger.info(
                "Starting weather check for %s (%.5f, %.5f)",
                self.location.name, self.location.latitude, self.location.longitude,
            )
            info, bundle = self.fetcher.fetch(self.location)
            summarizer.record_location(info.name)
        except Exception as e:
            logger.exception("Weather check failed")
            summarizer.record_error(str(e))
            summarizer.record_duration(time.monotonic() - start_time)
            return self._finish(summarizer, [])

        return self._evaluate(bundle, summarizer, start_time)

    def run_bundle(self, bundle: RawForecastBundle) -> CheckResult:
        """Evaluate an already-fetched forecast bundle."""
        return self._evaluate(bundle, self._start(), time.monotonic())

    def _start(self) -> RunSummarizer:
        run_id = str(uuid.uuid4())
        logger.info("Run %s config=%s", run_id[:8], config_hash(self.config))
        return RunSummarizer(run_id, self.location.name)

    def _evaluate(
        self, bundle: RawForecastBundle, summarizer: RunSummarizer, start_time: float
    ) -> CheckResult:
        builder = WindowBuilder(self.config)
        result = builder.build(bundle)
        summarizer.record_build(result.stats)
        summarizer.record_windows(result.windows)
        summarizer.record_duration(time.monotonic() - start_time)
        return self._finish(summarizer, result.windows)

    def _finish(
        self, summarizer: RunSummarizer, windows: list[FishingWindow]
    ) -> CheckResult:
        summary = summarizer.finalize()
        now = self.now or local_now()

        if summary.errors:
            delivery = DeliveryDecision(send=False, reason="check failed")
        else:
            delivery = decide_delivery(windows, now.date(), self.config.delivery)
        logger.info("\n%s", format_summary_text(summary))
        logger.info(
            "Delivery: %s (%s)", "send" if delivery.send else "skip", delivery.reason
        )

        return CheckResult(
            summary=summary,
            windows=windows,
            subject=format_subject(windows, summary.location, now),
            report=format_report_text(windows, summary.location, now),
            delivery=delivery,
        )
