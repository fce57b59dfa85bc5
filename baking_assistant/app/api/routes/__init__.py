from fastapi import APIRouter

from baking_assistant.app.api.routes import recipes

api_router = APIRouter()
api_router.include_router(recipes.router)
