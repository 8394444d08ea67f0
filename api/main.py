# ============================================================================
# api/main.py
# ============================================================================
"""
FastAPI Backend for Health Record Insights

Runs on port 8000.
Accepts a record descriptor and returns the analysis the app stores
alongside the record. Nothing is persisted here.
"""

import sys
import logging
from pathlib import Path
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ConfigDict, Field

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from health_insights.core import get_config, RecordDescriptor
from health_insights.core.orchestrator import analyze_health_record
from health_insights.providers import is_usable_key, resolve_groq_api_key
from health_insights.utils.logging import setup_logging

setup_logging()


app = FastAPI(
    title="Health Record Insights API",
    description="Structured analysis for uploaded health records",
    version="1.0.0",
)

# CORS for the web frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "http://localhost:3000",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# Models
# ============================================================================

class AnalyzeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str
    record_type: str = Field(alias="recordType")
    service_date: str = Field(alias="serviceDate")
    description: Optional[str] = ""
    file_url: Optional[str] = Field(default=None, alias="fileUrl")
    file_name: Optional[str] = Field(default=None, alias="fileName")

    def to_record(self) -> RecordDescriptor:
        return RecordDescriptor(
            title=self.title,
            record_type=self.record_type,
            service_date=self.service_date,
            description=self.description or "",
            file_url=self.file_url,
            file_name=self.file_name,
        )


# ============================================================================
# Endpoints
# ============================================================================

@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "Health Record Insights API"}


@app.get("/api/health")
async def health():
    """Health check for monitoring."""
    return {"status": "healthy"}


@app.get("/api/providers")
async def providers():
    """Which providers have usable credentials (keys are never returned)."""
    config = get_config()
    return {
        "groq": resolve_groq_api_key(config) is not None,
        "openai": is_usable_key(config.get('openai_api_key')),
        "huggingface": is_usable_key(config.get('huggingface_api_key')),
    }


@app.post("/api/analyze")
async def analyze(request: AnalyzeRequest) -> Dict[str, Any]:
    """Analyze one record; always answers with a result."""
    record = request.to_record()
    logger.info(f"Analyze request: '{record.title}' ({record.record_type})")
    result = await analyze_health_record(record)
    return result.to_dict()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
