# api/v1/router.py
from fastapi import APIRouter

from . import meals, shopping, support

api_router = APIRouter()

api_router.include_router(meals.router, prefix="/meals", tags=["Meals"])
api_router.include_router(shopping.router, prefix="/shopping-lists", tags=["Shopping lists"])
api_router.include_router(support.router, prefix="/support", tags=["Support"])
