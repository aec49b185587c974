import logging

import uvicorn
from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from .logging_config import setup_logging
from .settings import settings
from .routers import health, formula

logger = logging.getLogger(__name__)

app = FastAPI(title="AI Math Formula Helper API")
app.include_router(health.router)
app.include_router(formula.router)

@app.get("/", include_in_schema=False)
async def redirect_root_to_docs():
	return RedirectResponse(url="/docs")

@app.get("/info")
def root():
	return {"status": "ok", "gemini_configured": bool(settings.gemini_api_key)}

@app.on_event("startup")
async def startup_event():
	setup_logging(settings.log_level, settings.log_file)
	if not settings.gemini_api_key:
		logger.warning("GEMINI_API_KEY is not set; analysis requests will fail until it is configured")

def run() -> None:
	uvicorn.run("backend.app.main:app", host=settings.api_host, port=settings.api_port)

if __name__ == "__main__":
	run()
