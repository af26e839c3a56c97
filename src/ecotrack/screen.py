"""Scanner screen state and the transitions that drive it."""

import asyncio
import logging

import httpx

from ecotrack.models import CameraPermission, ScreenState
from ecotrack.services.lookup import display_text, lookup_product

logger = logging.getLogger(__name__)

SETTINGS_URL = "app-settings:"


class Screen:
    """Owns the scanner screen's state.

    State is only mutated from the event loop; lookups run in a worker
    thread and their results are applied once awaited.
    """

    def __init__(self, client: httpx.Client | None = None) -> None:
        self.state = ScreenState()
        self.client = client

    def start_scanning(self, permission: CameraPermission, granted: bool | None = None) -> ScreenState:
        """Open the scanner, or raise the permission alert.

        ``granted`` is the answer to the access prompt shown while the
        permission is still undetermined.
        """
        if permission is CameraPermission.AUTHORIZED:
            self.state.is_showing_scanner = True
        elif permission is CameraPermission.NOT_DETERMINED:
            if granted:
                self.state.is_showing_scanner = True
            else:
                self.state.show_permission_alert = True
        else:
            self.state.show_permission_alert = True
        return self.state

    def dismiss_alert(self) -> ScreenState:
        self.state.show_permission_alert = False
        return self.state

    async def complete_scan(self, code: str | None = None) -> ScreenState:
        """Handle the scanner closing and look up the current barcode.

        A dismissed scanner (``code is None``) keeps the previous barcode, which
        is looked up again unless nothing has been scanned yet.  A result that
        arrives after a newer scan session has ended is discarded.
        """
        self.state.is_showing_scanner = False
        self.state.session += 1
        session = self.state.session
        if code is not None:
            self.state.scanned_code = code

        result = await asyncio.to_thread(lookup_product, self.state.scanned_code, self.client)
        if result is None:
            return self.state
        if session != self.state.session:
            logger.debug("Dropping lookup result from stale session %d (current %d)", session, self.state.session)
            return self.state

        self.state.product_info = display_text(result)
        return self.state
