"""Services for the Fact Check List demo."""

from .actions import (
    LinkOpener,
    FileDownloader,
    BrowserLinkOpener,
    LocalFileDownloader,
    ActionService,
    resolve_static_asset,
)

__all__ = [
    "LinkOpener",
    "FileDownloader",
    "BrowserLinkOpener",
    "LocalFileDownloader",
    "ActionService",
    "resolve_static_asset",
]
