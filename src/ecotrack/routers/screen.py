"""Scanner screen endpoints."""

from fastapi import APIRouter

import ecotrack.app as _app
from ecotrack.models import CompleteScanRequest, ScreenCopy, ScreenState, SettingsResponse, StartScanRequest
from ecotrack.screen import SETTINGS_URL

router = APIRouter()


@router.get("", response_model=ScreenState)
async def get_state() -> ScreenState:
    """Return the current screen state."""
    return _app.screen.state


@router.get("/copy", response_model=ScreenCopy)
async def get_copy() -> ScreenCopy:
    """Return the static text shown on the screen."""
    return ScreenCopy(**_app.screen_copy)


@router.post("/scan/start", response_model=ScreenState)
async def start_scan(body: StartScanRequest) -> ScreenState:
    """Check camera permission and open the scanner when allowed."""
    return _app.screen.start_scanning(body.permission, body.granted)


@router.post("/scan/complete", response_model=ScreenState)
async def complete_scan(body: CompleteScanRequest) -> ScreenState:
    """Close the scanner and show product information for the scanned code."""
    return await _app.screen.complete_scan(body.code)


@router.post("/alert/dismiss", response_model=ScreenState)
async def dismiss_alert() -> ScreenState:
    return _app.screen.dismiss_alert()


@router.get("/settings", response_model=SettingsResponse)
async def settings() -> SettingsResponse:
    """Where the "Open Settings" alert action points."""
    return SettingsResponse(url=SETTINGS_URL)
