from fastapi import APIRouter
import qsar_assistant.api.v1.routes.chat as chat
import qsar_assistant.api.v1.routes.examples as examples
import qsar_assistant.api.v1.routes.report as report

api_router = APIRouter()

api_router.include_router(
    chat.router,
    prefix="",
)

api_router.include_router(
    examples.router,
    prefix="",
)

api_router.include_router(
    report.router,
    prefix="",
)
