"""FastAPI dependency utilities."""

from functools import lru_cache

from fastapi import Depends

from notifier.application.dispatcher import ChannelDispatcher
from notifier.config import Settings, get_settings
from notifier.infrastructure.channels import build_channel_dispatcher


@lru_cache
def get_channel_dispatcher() -> ChannelDispatcher:
    """Return the dispatcher wired to the configured delivery providers."""

    return build_channel_dispatcher(get_settings())


def get_strict_template_lookup(settings: Settings = Depends(get_settings)) -> bool:
    """Return whether unknown template ids must reject a bulk send."""

    return settings.strict_template_lookup


def close_channel_dispatcher() -> None:
    """Close the cached dispatcher's provider connections, if it was built."""

    if get_channel_dispatcher.cache_info().currsize:
        get_channel_dispatcher().close()
    get_channel_dispatcher.cache_clear()
