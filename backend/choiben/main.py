from fastapi import FastAPI
from .core.config import settings
from .core.logging import setup_logging
from .api.v1 import activity, health, suggestions, todos

app = FastAPI(title=settings.APP_NAME)
app.include_router(health.router, prefix=settings.API_V1_PREFIX)
app.include_router(todos.router, prefix=settings.API_V1_PREFIX)
app.include_router(suggestions.router, prefix=settings.API_V1_PREFIX)
app.include_router(activity.router, prefix=settings.API_V1_PREFIX)

@app.on_event("startup")
def on_startup():
    setup_logging()
