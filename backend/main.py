"""FastAPI main application"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api import generate
from config import settings
from services.graphic_history import graphic_history

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifecycle manager for the application"""
    print(f"🚀 Signal Forge API starting on {settings.api_host}:{settings.api_port}")
    print(f"🧾 History: {settings.history_max_entries} graphics/session, TTL {settings.history_ttl_seconds}s")

    yield

    removed = await graphic_history.cleanup_expired()
    print(f"👋 Signal Forge API shutting down ({removed} expired graphics dropped)")

app = FastAPI(
    title="Signal Forge API",
    description="Prompt + accent color to HUD-style vector graphics",
    version=VERSION,
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(generate.router)

@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "Signal Forge API",
        "version": VERSION,
        "docs": "/docs"
    }

@app.get("/health")
async def health():
    """Health check endpoint"""
    return {"status": "healthy", "history": graphic_history.stats()}

if __name__ == "__main__":
    import uvicorn
    config = uvicorn.Config(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level
    )
    server = uvicorn.Server(config)
    server.run()
