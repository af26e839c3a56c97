"""Product lookup against the Open Food Facts v0 product API.

Every outcome, including network and decoding failures, is reported as a
``LookupResult`` variant; nothing is raised to the caller.
"""

import json
import logging
from urllib.parse import quote

import httpx

from ecotrack.models import (
    NO_DATA_RECEIVED,
    NOT_SCANNED,
    InvalidInput,
    LookupResult,
    NotFound,
    ParseError,
    Success,
    TransportError,
)

logger = logging.getLogger(__name__)

OFF_BASE_URL = "https://world.openfoodfacts.org"


class InvalidBarcodeError(ValueError):
    """The barcode cannot be placed in a product URL."""


def build_product_url(barcode: str) -> httpx.URL:
    """Return the product URL for *barcode*.

    The barcode is percent-encoded as a single path segment, so reserved
    characters cannot change which resource is requested.
    """
    if not barcode:
        raise InvalidBarcodeError("empty barcode")
    try:
        segment = quote(barcode, safe="")
    except UnicodeEncodeError as e:
        raise InvalidBarcodeError(str(e)) from e
    try:
        return httpx.URL(f"{OFF_BASE_URL}/api/v0/product/{segment}.json")
    except httpx.InvalidURL as e:
        raise InvalidBarcodeError(str(e)) from e


def parse_product_record(body: bytes) -> LookupResult:
    """Map a raw response body to ``ParseError``, ``Success`` or ``NotFound``."""
    try:
        data = json.loads(body)
    except (ValueError, RecursionError) as e:
        return ParseError(message=str(e))

    product = data.get("product") if isinstance(data, dict) else None
    if isinstance(product, dict):
        name = product.get("product_name")
        brand = product.get("brands")
        if isinstance(name, str) and isinstance(brand, str):
            return Success(name=name, brand=brand)
    return NotFound()


def lookup_product(barcode: str, client: httpx.Client | None = None) -> LookupResult | None:
    """Look up *barcode* and classify the outcome.

    Returns ``None`` without touching the network when *barcode* is the
    not-scanned placeholder.  Otherwise exactly one GET is issued (no retry)
    and exactly one result is returned.

    Args:
        barcode: Scanned barcode string.
        client:  Optional httpx client; a fresh one is used when omitted.
    """
    if barcode == NOT_SCANNED:
        return None

    try:
        url = build_product_url(barcode)
    except InvalidBarcodeError as e:
        logger.warning("Cannot build product URL for %.50s: %s", barcode, e)
        return InvalidInput()

    try:
        if client is None:
            with httpx.Client() as own_client:
                response = own_client.get(url)
        else:
            response = client.get(url)
    except httpx.HTTPError as e:
        logger.warning("Product lookup failed for %.50s: %s", barcode, e)
        return TransportError(message=str(e))

    if response.is_error:
        logger.warning("Product lookup for %.50s returned HTTP %s", barcode, response.status_code)
    if not response.content:
        return TransportError(message=NO_DATA_RECEIVED, empty_body=True)

    result = parse_product_record(response.content)
    logger.debug("Product lookup for %.50s: %s", barcode, result.kind)
    return result


def display_text(result: LookupResult) -> str:
    """Render a lookup result as the text shown under "Product Information"."""
    if isinstance(result, Success):
        return f"Name: {result.name}\nBrand: {result.brand}"
    if isinstance(result, InvalidInput):
        return "Invalid URL"
    if isinstance(result, TransportError):
        if result.empty_body:
            return "No data received"
        return f"Error fetching data: {result.message}"
    if isinstance(result, ParseError):
        return f"Error parsing data: {result.message}"
    return "Product not found"
