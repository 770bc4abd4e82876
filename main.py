from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

import settings
from sportfit.routes import router as sport_recommendations_router

logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL, logging.INFO))
logging.info(
    f"App starting with catalogue: {settings.SPORT_CATALOGUE_PATH or 'embedded'}"
)

app = FastAPI(title="Sport-Fit Recommendation Service")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(sport_recommendations_router)


@app.get("/health", tags=["meta"], summary="Health check")
def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000)
