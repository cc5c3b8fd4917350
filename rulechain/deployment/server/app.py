"""
rulechain/deployment/server/app.py
==================================
FastAPI server for RuleChain.
Exposes rule/fact management and forward chaining as REST endpoints.
Requires: fastapi, uvicorn (installed with rulechain)
"""
from __future__ import annotations
import logging
from typing import Optional
import uvicorn
from fastapi import FastAPI
from rulechain.core.config import ServerConfig
from rulechain.deployment.server.routes import get_engine, router
from rulechain.deployment.server.middleware import setup_middleware
from rulechain.symbolic.knowledge import get_example, load_knowledge_base
from rulechain.version import FRAMEWORK_DESCRIPTION, FRAMEWORK_NAME, __version__

logger = logging.getLogger(__name__)

app = FastAPI(
    title=f"{FRAMEWORK_NAME} Inference Server",
    description=FRAMEWORK_DESCRIPTION,
    version=__version__,
)

setup_middleware(app)
app.include_router(router, prefix="/api/v1")


@app.get("/health")
async def health():
    engine = get_engine()
    return {
        "status": "ok",
        "framework": "rulechain",
        "version": __version__,
        "rules": engine.rule_count,
        "facts": engine.fact_count,
    }


def preload(example: Optional[str]) -> None:
    """Load a bundled knowledge base into the shared engine."""
    if example:
        load_knowledge_base(get_engine(), get_example(example))
        logger.info(f"Preloaded example '{example}'")


def serve(config: Optional[ServerConfig] = None):
    config = config or ServerConfig()
    preload(config.example)
    if config.reload:
        # Reload spawns a fresh interpreter, so preloaded state does not carry over.
        uvicorn.run("rulechain.deployment.server.app:app", host=config.host, port=config.port, reload=True)
    else:
        uvicorn.run(app, host=config.host, port=config.port)


if __name__ == "__main__":
    serve()
