# teamdesk/main.py
# Run with: uvicorn teamdesk.main:app --reload
import logging

from teamdesk import config

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("teamdesk")

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from teamdesk import models  # noqa: F401  (registers every table on Base.metadata)
from teamdesk.database import Base, engine
from teamdesk.errors import register_error_handlers

from teamdesk.auth.auth_router import auth_router
from teamdesk.settings.router import router as settings_router
from teamdesk.employees.router import router as employee_router
from teamdesk.projects.router import router as project_router
from teamdesk.tasks.router import router as task_router
from teamdesk.salary.router import router as salary_router
from teamdesk.dashboard_router import router as dashboard_router
from teamdesk.ai_chat.router import router as ai_chat_router

API_PREFIX = "/api"

app = FastAPI(title="TeamDesk")

# -------------------- Middleware & errors --------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)
register_error_handlers(app)

# ------------------- Routers -------------------
for r in (
    auth_router,
    settings_router,
    employee_router,
    project_router,
    task_router,
    salary_router,
    dashboard_router,
    ai_chat_router,
):
    app.include_router(r, prefix=API_PREFIX)


@app.get("/")
def home():
    return {
        "message": "TeamDesk API running!",
        "endpoints": {
            "auth": f"{API_PREFIX}/auth",
            "employees": f"{API_PREFIX}/employees",
            "projects": f"{API_PREFIX}/projects",
            "tasks": f"{API_PREFIX}/tasks",
            "salary": f"{API_PREFIX}/salary",
            "dashboard": f"{API_PREFIX}/dashboard",
        },
    }


# ------------------- Startup -------------------
@app.on_event("startup")
def _create_tables_and_log_routes():
    Base.metadata.create_all(bind=engine)

    for route in app.routes:
        if hasattr(route, "methods"):
            logger.debug("route %-40s %s", route.path, sorted(route.methods))
    logger.info("TeamDesk started (database=%s)", engine.url.render_as_string(hide_password=True))
