from importlib.metadata import version as pkg_version

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from scouted.api import data_router, health_router
from scouted.config import settings

app = FastAPI(
    title=settings.app_name,
    version=pkg_version("scouted"),
    debug=settings.debug,
)

app.include_router(data_router)
app.include_router(health_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Static site front-ends on any origin
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
)
