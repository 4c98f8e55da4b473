"""Sequential bulk sending with fixed pacing."""

import logging
import time
from typing import Callable, Iterable, Optional

from .dispatcher import EmailDispatcher
from .models import BulkFailure, BulkOutcome, EmailRequest

logger = logging.getLogger(__name__)

UNKNOWN_ERROR = "Unknown error"


class BulkDispatcher:
    """Sends many emails one after another through an EmailDispatcher.

    Sends never overlap and every send is followed by ``pacing_delay``
    seconds of waiting, so a run of n requests takes at least
    n * pacing_delay plus the time of the sends themselves. Pacing only
    holds within one ``send_all`` call: running two bulk sends at the same
    time against one provider defeats it.
    """

    def __init__(
        self,
        dispatcher: EmailDispatcher,
        pacing_delay: Optional[float] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """Initialize the bulk dispatcher.

        Args:
            dispatcher: Dispatcher used for each send
            pacing_delay: Seconds to wait after each send; defaults to the
                dispatcher's settings
            sleep: Sleep function, injectable for tests
        """
        self.dispatcher = dispatcher
        if pacing_delay is None:
            pacing_delay = dispatcher.settings.pacing_delay
        self.pacing_delay = pacing_delay
        self.sleep = sleep

    def send_all(self, requests: Iterable[EmailRequest]) -> BulkOutcome:
        """Send every request in order.

        Args:
            requests: Email requests

        Returns:
            BulkOutcome with successes and failures in input order
        """
        requests = list(requests)
        outcome = BulkOutcome()

        for index, request in enumerate(requests):
            try:
                result = self.dispatcher.send(request)
                if result.success:
                    outcome.succeeded.append(result)
                else:
                    outcome.failed.append(BulkFailure(request=request, error=result.error or UNKNOWN_ERROR))
            except Exception as e:
                logger.error(f"Error processing email {index + 1}: {e}")
                outcome.failed.append(BulkFailure(request=request, error=str(e) or UNKNOWN_ERROR))

            logger.info(f"Processed email {index + 1}/{len(requests)}: {request.to}")
            self.sleep(self.pacing_delay)

        logger.info(
            f"Bulk send finished: {len(outcome.succeeded)} sent, {len(outcome.failed)} failed"
        )
        return outcome
