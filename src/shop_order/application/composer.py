"""Draft submission flow: Validating → Submitting → Submitted | Failed.

Every outcome is reported on the notification channel under one dedupe
key, so the "Creating order..." message is replaced by its result.
Entered values are never cleared on rejection or failure.
"""
import logging
from typing import Protocol

from src.shop_common.enums import NotificationKind
from src.shop_common.errors import SubmissionFailedError
from src.shop_common.notifications import Notifier
from src.shop_order.domain.draft import (
    CatalogLookup,
    OrderDraft,
    check_shipping,
    check_variants,
    validate,
)

logger = logging.getLogger(__name__)

CREATE_ORDER_KEY = "create-order"


class OrderSubmitter(Protocol):
    async def submit_order(self, draft: OrderDraft) -> str:
        """Send the draft; return the success message or raise SubmissionFailedError."""
        ...


def run_checks(draft: OrderDraft, lookup: CatalogLookup) -> str | None:
    """Return the first rejection message, or None when the draft may be submitted."""
    for result in (
        check_shipping(draft),
        check_variants(draft, lookup),
        validate(draft, lookup),
    ):
        if not result.ok:
            return result.message
    return None


async def submit_draft(
    draft: OrderDraft,
    lookup: CatalogLookup,
    submitter: OrderSubmitter,
    notifier: Notifier,
) -> bool:
    """Validate and submit ``draft``. Returns True once the order is created."""
    draft.begin_validation()
    rejection = run_checks(draft, lookup)
    if rejection is not None:
        draft.reject(rejection)
        notifier.notify(NotificationKind.ERROR, rejection, CREATE_ORDER_KEY)
        return False

    draft.begin_submit()
    notifier.notify(NotificationKind.INFO, "Creating order...", CREATE_ORDER_KEY)
    try:
        message = await submitter.submit_order(draft)
    except SubmissionFailedError as exc:
        logger.warning("Order submission failed: %s", exc.message)
        draft.mark_failed(exc.message)
        notifier.notify(NotificationKind.ERROR, exc.message, CREATE_ORDER_KEY)
        return False

    draft.mark_submitted(message)
    notifier.notify(NotificationKind.SUCCESS, message, CREATE_ORDER_KEY)
    return True
