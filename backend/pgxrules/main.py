from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pgxrules.core import logging  # Initialize logging
from pgxrules.api.router import api_router
from pgxrules.services.pharmacogenomics.config import get_config
from pgxrules.services.pharmacogenomics.gene_definitions import SUPPORTED_GENES

app = FastAPI(
    title="PGx Rules Engine",
    description="Deterministic multi-gene pharmacogenomic rule pipeline: genotypes in, dosing guidance out",
    version=get_config().api_version
)

# CORS Configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API Routers
app.include_router(api_router, prefix="/api/v1")


@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "PGx Rules Engine", "genes": list(SUPPORTED_GENES)}
