"""Wait for a broadcast transaction to be confirmed.

The waiter polls the node for the pending transaction and, while it is not
yet confirmed, blocks until the next round starts before polling again.
It ends in exactly one of these ways:

    * the transaction was confirmed in a round > 0 (success)
    * the node failed to report its status or the next round (:exc:`NodeQueryError`)
    * the deadline elapsed (:exc:`ConfirmationTimeoutError`)
    * the caller set the cancellation event (:exc:`ConfirmationAbandoned`)

A failing pending-transaction query is considered transient and simply
re-polled. All waits yield to the gevent hub, so concurrent runs are not
blocked by one another.
"""
import time
from typing import Optional

import gevent
import structlog
from gevent import Timeout
from gevent.event import Event

from asset_manager.exceptions import (
    ConfirmationAbandoned,
    ConfirmationTimeoutError,
    NodeQueryError,
)
from asset_manager.exceptions.services import ServiceError
from asset_manager.lifecycle.metrics import CONFIRMATION_WAIT_SECONDS
from asset_manager.lifecycle.types import ConfirmationResult

log = structlog.get_logger(__name__)


class ConfirmationWaiter:
    def __init__(self, ledger):
        self.ledger = ledger

    def wait(
        self, tx_id: str, timeout: Optional[float] = None, cancel_event: Optional[Event] = None
    ) -> ConfirmationResult:
        """Block the calling greenlet until `tx_id` is confirmed.

        At least one of `timeout` (seconds) or `cancel_event` must be given;
        waiting without either could go on forever.

        :raises ConfirmationTimeoutError: if `timeout` elapsed first.
        :raises ConfirmationAbandoned: if `cancel_event` was set first.
        :raises NodeQueryError: if the node could not report its status.
        """
        if timeout is None and cancel_event is None:
            raise ValueError("Refusing to wait for confirmation without a timeout or cancel event")

        deadline = time.monotonic() + timeout if timeout is not None else None
        timer = Timeout(timeout)
        timer.start()
        try:
            with CONFIRMATION_WAIT_SECONDS.time():
                return self._poll(tx_id, deadline, cancel_event, timeout)
        except Timeout as ex:
            if ex is not timer:
                raise
            log.warning("Timed out waiting for confirmation", tx_id=tx_id, timeout=timeout)
            raise ConfirmationTimeoutError(tx_id, timeout) from None
        finally:
            timer.close()

    def _poll(self, tx_id, deadline, cancel_event, timeout) -> ConfirmationResult:
        while True:
            if cancel_event is not None and cancel_event.is_set():
                log.info("Confirmation wait cancelled", tx_id=tx_id)
                raise ConfirmationAbandoned(tx_id)
            if deadline is not None and time.monotonic() >= deadline:
                raise ConfirmationTimeoutError(tx_id, timeout)

            try:
                pending = self.ledger.pending_transaction(tx_id)
            except ServiceError as e:
                log.warning("Pending transaction query failed, polling again", tx_id=tx_id, error=str(e))
                gevent.sleep(0)
                continue

            confirmed_round = pending.get("confirmed-round") or 0
            if confirmed_round > 0:
                log.info("Transaction confirmed", tx_id=tx_id, round=confirmed_round)
                return ConfirmationResult(
                    confirmed_round=confirmed_round,
                    tx_id=tx_id,
                    asset_index=pending.get("asset-index"),
                )

            if pending.get("pool-error"):
                log.warning("Transaction pool error", tx_id=tx_id, pool_error=pending["pool-error"])

            self._wait_for_next_round(tx_id)

    def _wait_for_next_round(self, tx_id: str) -> None:
        try:
            last_round = self.ledger.status()["last-round"]
            log.debug("Waiting for next round", tx_id=tx_id, round=last_round + 1)
            self.ledger.wait_for_round(last_round + 1)
        except (ServiceError, KeyError) as e:
            raise NodeQueryError(f"Could not query node status: {e}", tx_id=tx_id) from e
