"""Simulated sends used when no provider is configured."""

import logging
import time
from typing import Callable

from .models import DispatchResult, EmailRequest

logger = logging.getLogger(__name__)

DEFAULT_SIMULATION_DELAY = 1.5


class Simulator:
    """Stand-in for the provider that always succeeds.

    Lets calling code run without credentials. No network or configuration
    is consulted.
    """

    def __init__(
        self,
        delay: float = DEFAULT_SIMULATION_DELAY,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.time,
    ):
        """Initialize the simulator.

        Args:
            delay: Seconds each simulated send takes
            sleep: Sleep function, injectable for tests
            clock: Wall clock in seconds, used for message ids
        """
        self.delay = delay
        self.sleep = sleep
        self.clock = clock

    def simulate(self, request: EmailRequest) -> DispatchResult:
        """Pretend to send an email.

        Args:
            request: Email request

        Returns:
            Successful DispatchResult with a ``sim_`` message id
        """
        self.sleep(self.delay)

        body = request.body or ""
        message_id = f"sim_{int(self.clock() * 1000)}"
        logger.info(
            f"Email simulation (provider not configured): to={request.to} "
            f"subject={request.subject!r} body={body[:100]!r}...",
            extra={"recipient": request.to, "message_id": message_id, "simulated": True},
        )

        return DispatchResult(success=True, message_id=message_id, simulated=True)
