"""Pydantic models for lookup results and the ecotrack API."""

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, Field

#: Placeholder held by the screen until a barcode has been scanned.
NOT_SCANNED = "Not scanned yet"

NO_PRODUCT_INFO = "No product information available"

NO_DATA_RECEIVED = "no data received"


class Success(BaseModel):
    """The product record carried both a name and a brand."""

    kind: Literal["success"] = "success"
    name: str
    brand: str


class NotFound(BaseModel):
    """No product, or a product missing its name or brand."""

    kind: Literal["not_found"] = "not_found"


class InvalidInput(BaseModel):
    """The barcode could not be turned into a request URL."""

    kind: Literal["invalid_input"] = "invalid_input"


class TransportError(BaseModel):
    """The request failed or came back without a body."""

    kind: Literal["transport_error"] = "transport_error"
    message: str
    #: Set when the request succeeded but the response had no body.
    empty_body: bool = False


class ParseError(BaseModel):
    """The response body was not valid JSON."""

    kind: Literal["parse_error"] = "parse_error"
    message: str


LookupResult = Annotated[
    Success | NotFound | InvalidInput | TransportError | ParseError,
    Field(discriminator="kind"),
]


class CameraPermission(str, Enum):
    """Camera authorization status as reported by the device."""

    NOT_DETERMINED = "not_determined"
    RESTRICTED = "restricted"
    DENIED = "denied"
    AUTHORIZED = "authorized"


class ScreenState(BaseModel):
    """Everything the scanner screen renders."""

    scanned_code: str = NOT_SCANNED
    product_info: str = NO_PRODUCT_INFO
    is_showing_scanner: bool = False
    show_permission_alert: bool = False
    #: Incremented each time a scan session ends; results from older sessions are dropped.
    session: int = 0


class StartScanRequest(BaseModel):
    """Request body for opening the scanner."""

    permission: CameraPermission
    #: Answer to the access prompt, only consulted while permission is undetermined.
    granted: bool | None = None


class CompleteScanRequest(BaseModel):
    """Scan-source event: the scanner closed, with or without a barcode."""

    code: str | None = None


class PermissionAlertCopy(BaseModel):
    title: str
    message: str
    confirm: str
    cancel: str


class ScreenCopy(BaseModel):
    """Static text shown on the scanner screen."""

    title: str
    start_button: str
    scanned_code_heading: str
    product_info_heading: str
    permission_alert: PermissionAlertCopy


class SettingsResponse(BaseModel):
    url: str


class ProductLookupResponse(BaseModel):
    """Outcome of an EAN/barcode lookup, with its display text."""

    ean: str
    result: LookupResult
    display: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "ok"
    version: str
