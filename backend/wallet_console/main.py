"""FastAPI application entry point."""
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from wallet_console.config import settings
from wallet_console.api.routes import wallets, addresses

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
    description="Console for custodial wallets: list, create, fund and transfer"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(wallets.router, prefix=f"{settings.api_prefix}/console/wallets", tags=["wallets"])
app.include_router(addresses.router, prefix=f"{settings.api_prefix}/console/wallets", tags=["addresses"])


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "CDP Wallet Console API",
        "version": settings.api_version,
        "docs": "/docs"
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


def run():
    """Serve the console with uvicorn."""
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
