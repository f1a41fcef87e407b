"""
SubFindr - Open Source Subdomain Enumeration Tool
Author: ha-2
GitHub: https://github.com/ha-2
License: CC BY-NC 4.0
"""

from fastapi import Depends, FastAPI
from fastapi.responses import PlainTextResponse, StreamingResponse
from functools import lru_cache
import logging
from dotenv import load_dotenv
import os

# Load environment variables from .env file
load_dotenv()

from subfindr.config import ScanSettings
from subfindr.schemas import ScanRequest
from subfindr.services.events import InvalidScanRequest, prepare_scan, sse_frames, stream_scan
from subfindr.services.prober import open_prober

# Set up logging
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)

app = FastAPI(
    title="SubFindr API",
    description="Live subdomain discovery with streamed results",
    version="2.0.0"
)

SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
}


@lru_cache()
def get_settings() -> ScanSettings:
    return ScanSettings.from_env()


def get_prober_factory():
    return open_prober


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}


@app.post("/api/scan")
async def scan_subdomains(request: ScanRequest,
                          settings: ScanSettings = Depends(get_settings),
                          prober_factory=Depends(get_prober_factory)):
    """Stream live subdomains for a domain as Server-Sent Events"""
    try:
        plan = prepare_scan(request, settings)
    except InvalidScanRequest as e:
        logger.info(f"Rejected scan request: {e}")
        return PlainTextResponse(str(e), status_code=400)

    logger.info(f"Accepted {plan.method.value} scan for {plan.domain} with {len(plan.candidates)} candidates")

    events = stream_scan(plan, settings, prober_factory=prober_factory)
    return StreamingResponse(sse_frames(events), media_type="text/event-stream", headers=SSE_HEADERS)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
