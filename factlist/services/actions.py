"""Environment actions: opening external links and downloading static assets."""

import logging
import shutil
import webbrowser
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from ..config import settings

logger = logging.getLogger(__name__)


class LinkOpener(ABC):
    """Abstract capability for opening a URL in a new browsing context."""

    @abstractmethod
    def open(self, url: str) -> None:
        """Open the URL. Fire-and-forget."""
        pass


def resolve_static_asset(static_dir: Union[str, Path], resource_path: str) -> Path:
    """Map a resource path such as ``/guide.pdf`` onto the static root.

    Raises:
        ValueError: If the path points outside the static root
    """
    root = Path(static_dir).resolve()
    source = (root / resource_path.lstrip("/")).resolve()
    if root not in source.parents:
        raise ValueError(f"Resource path escapes the static directory: {resource_path}")
    return source


class FileDownloader(ABC):
    """Abstract capability for saving a static asset under a suggested name."""

    @abstractmethod
    def download(self, resource_path: str, filename: str) -> None:
        """Start a save-as download of a static asset.

        Args:
            resource_path: Path of the asset, relative to the static root
            filename: Suggested file name for the saved copy
        """
        pass


class BrowserLinkOpener(LinkOpener):
    """Opens links in a new tab of the user's default browser."""

    def open(self, url: str) -> None:
        logger.info(f"Opening {url} in a new browser tab")
        if not webbrowser.open_new_tab(url):
            raise RuntimeError(f"No browser available to open {url}")


class LocalFileDownloader(FileDownloader):
    """Copies assets from a static directory into a destination directory."""

    def __init__(
        self,
        destination_dir: Union[str, Path],
        static_dir: Optional[Union[str, Path]] = None
    ):
        """Initialize the downloader.

        Args:
            destination_dir: Where downloaded files are written
            static_dir: Root of the static assets (defaults to settings)
        """
        self.destination_dir = Path(destination_dir)
        self.static_dir = Path(static_dir or settings.STATIC_DIR)

    def download(self, resource_path: str, filename: str) -> None:
        source = resolve_static_asset(self.static_dir, resource_path)
        self.destination_dir.mkdir(parents=True, exist_ok=True)
        target = self.destination_dir / Path(filename).name

        shutil.copyfile(source, target)
        logger.info(f"Downloaded {resource_path} to {target}")


class ActionService:
    """The page's call-to-action buttons, wired to injected capabilities.

    Both actions are fire-and-forget: if the host cannot perform them the
    failure is logged and nothing is reported back to the caller.
    """

    def __init__(
        self,
        link_opener: LinkOpener,
        file_downloader: FileDownloader,
        start_url: Optional[str] = None,
        guide_asset_path: Optional[str] = None,
        guide_filename: Optional[str] = None
    ):
        self.link_opener = link_opener
        self.file_downloader = file_downloader
        self.start_url = start_url or settings.START_URL
        self.guide_asset_path = guide_asset_path or settings.GUIDE_ASSET_PATH
        self.guide_filename = guide_filename or settings.GUIDE_FILENAME

    def start_fact_checking(self) -> None:
        """Open the external assistant in a new tab."""
        try:
            self.link_opener.open(self.start_url)
        except Exception as e:
            logger.warning(f"Could not open {self.start_url}: {e}")

    def download_guide(self) -> None:
        """Download the Fact Check List Pattern guide."""
        try:
            self.file_downloader.download(self.guide_asset_path, self.guide_filename)
        except Exception as e:
            logger.warning(f"Could not download {self.guide_asset_path}: {e}")
