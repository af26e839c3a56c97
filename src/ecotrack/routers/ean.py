"""EAN/barcode product lookup endpoints."""

import asyncio

from fastapi import APIRouter, HTTPException

import ecotrack.app as _app
from ecotrack.models import ProductLookupResponse
from ecotrack.services.lookup import display_text, lookup_product

router = APIRouter()


@router.get("/{ean}", response_model=ProductLookupResponse)
async def lookup_ean(ean: str) -> ProductLookupResponse:
    """Look up product data by EAN/barcode.

    Upstream failures are reported in ``result`` with a 200 status; only the
    not-scanned placeholder is rejected with 404.
    """
    result = await asyncio.to_thread(lookup_product, ean, _app.screen.client)
    if result is None:
        raise HTTPException(status_code=404, detail="No barcode scanned")
    return ProductLookupResponse(ean=ean, result=result, display=display_text(result))
