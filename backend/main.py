"""
arXiv Digest FastAPI Application.

Main application entry point with CORS, error handling, and router registration.
"""

import logging

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from arxiv_digest.config import Config
from arxiv_digest.exceptions import ArxivError
from arxiv_digest.logging_config import setup_logging
from arxiv_digest.manager import PaperSearchService

from backend.dependencies import get_search_service
from backend.routers import papers_router

config = Config.from_env()
setup_logging(config.log)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="arXiv Digest API",
    description="Search arXiv and render the results as text or HTML",
    version="0.1.0",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.server.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(papers_router, prefix="/api/papers", tags=["papers"])


@app.exception_handler(ArxivError)
async def arxiv_error_handler(request: Request, exc: ArxivError):
    """Turn any search failure into a generic 500 response."""
    logger.error(f"Request {request.url.path} failed: {exc}")
    return PlainTextResponse(f"Something went wrong: {exc}", status_code=500)


@app.get("/", response_class=PlainTextResponse)
def root(service: PaperSearchService = Depends(get_search_service)):
    """Root endpoint - plain-text report for the default query."""
    return service.search_table()


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=config.server.host, port=config.server.port)
