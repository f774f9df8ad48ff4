"""Root API router aggregating all sub-routers.

Both routes are mounted at the root path: ``/`` for the greeting and
``/health`` for the probes configured in k8s/deployment.yaml.
"""

from fastapi import APIRouter

from demo_microservice.api.greeting.router import router as greeting_router
from demo_microservice.api.system.router import router as system_router

api_router = APIRouter()
api_router.include_router(greeting_router, tags=["greeting"])
api_router.include_router(system_router, tags=["system"])
