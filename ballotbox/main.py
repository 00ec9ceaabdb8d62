# main.py
import logging

from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware

from ballotbox.config import CORS_ORIGINS, LOG_LEVEL
from ballotbox.routes.auth_routes import auth_router
from ballotbox.routes.election_routes import router as election_router
from ballotbox.routes.vote_routes import vote_router

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="BallotBox",
    description="Create time-boxed elections, cast one vote per user and tally the results.",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router)
app.include_router(election_router)
app.include_router(vote_router)


@app.get("/health", tags=["Root"])
def health_check():
    return {"status": "healthy", "database": "MongoDB"}


@app.get("/", tags=["Root"])
def read_root():
    return {"message": "Welcome to the BallotBox API"}


@app.get("/favicon.ico", include_in_schema=False)
def favicon():
    return Response(status_code=204)
