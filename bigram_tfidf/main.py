import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

from bigram_tfidf.api.api_v1.api import api_router
from bigram_tfidf.core.config import settings
from bigram_tfidf.initialization import ApplicationInitializer
from bigram_tfidf.settings import CacheFiles

# Initialize logger for uvicorn
uvicorn_logger = logging.getLogger("uvicorn")

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager: score the default corpus once at startup."""

    initializer = ApplicationInitializer()

    try:
        uvicorn_logger.info("🚀 Starting Bigram TF-IDF API initialization...")

        export_path = CacheFiles.SCORED_TABLE_PATH if settings.EXPORT_ON_STARTUP else None
        corpus_status = initializer.initialize_corpus(export_path=export_path)

        if corpus_status["corpus_loaded"]:
            uvicorn_logger.info(f"⚡ Scored {corpus_status['scored_entries']:,} entries "
                                f"over {corpus_status['groups']} groups in {corpus_status['scoring_time']:.2f}s")
            for warning in corpus_status.get("warnings", []):
                uvicorn_logger.warning(f"⚠️ {warning}")
        elif "error" in corpus_status:
            uvicorn_logger.error(f"❌ Error: {corpus_status['error']}")

        app.state.initializer = initializer
        app.state.initialization_summary = initializer.get_initialization_summary()

        uvicorn_logger.info("🎉 Bigram TF-IDF API initialization completed! 🚀")

        yield

    except Exception as e:
        uvicorn_logger.error(f"🔥 Startup error: {e}")
        raise

# FastAPI app setup
app = FastAPI(
    title="Bigram TF-IDF API",
    description="Scores bigrams per group (city, topic) with term frequency–inverse document frequency",
    version="1.0.0",
    lifespan=lifespan
)

# API Router Setup
app.include_router(api_router, prefix="/api/v1")

@app.get("/")
def read_root():
    """Root endpoint with API information."""
    return {
        "message": "Bigram TF-IDF API is running!",
        "version": "1.0.0",
        "features": [
            "URL stripping and whitespace tokenization",
            "N-gram level stopword filtering",
            "Per-group bigram frequencies",
            "tf-idf scoring across groups",
        ],
        "docs": "/docs",
        "health": "/health"
    }

@app.get("/health")
def health_check():
    """Health check with the status of the default corpus."""
    summary = getattr(app.state, "initialization_summary", None)
    if summary is None:
        return {"status": "initializing", "version": "1.0.0"}
    return {
        "status": "healthy",
        "version": "1.0.0",
        "components": summary,
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
