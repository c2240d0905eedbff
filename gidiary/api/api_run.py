from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import logging

from gidiary.api.routes import analysis, planning, session
from gidiary.utilities.config import DEBUG
from gidiary.utilities.date_time import now_iso

# Logging
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(title="GI Diary Fuel API", debug=DEBUG)

# Include routers
app.include_router(planning.router)
app.include_router(session.router)
app.include_router(analysis.router)


@app.exception_handler(RequestValidationError)
async def _log_validation_error(request: Request, exc: RequestValidationError):
    """Same 422 body FastAPI sends by default, plus a log line."""
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=422, content={"detail": jsonable_encoder(exc.errors())})


# -------------------- API: Health --------------------
@app.get('/api/health')
def api_health():
    return {"status": "ok", "time": now_iso()}
