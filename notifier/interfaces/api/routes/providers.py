"""Endpoints exposing the state of the delivery providers."""

from fastapi import APIRouter, Depends, HTTPException, status

from notifier.application.dispatcher import ChannelDispatcher
from notifier.interfaces.api.dependencies import get_channel_dispatcher
from notifier.interfaces.api.schemas import SmsBalanceRead

router = APIRouter(prefix="/providers", tags=["providers"])


@router.get("/sms/balance", response_model=SmsBalanceRead)
def read_sms_balance(
    dispatcher: ChannelDispatcher = Depends(get_channel_dispatcher),
) -> SmsBalanceRead:
    """Return the balance reported by the SMS gateway."""

    outcome = dispatcher.sms_balance()
    if not outcome.success:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=outcome.error)
    return SmsBalanceRead(balance=outcome.provider_data)
