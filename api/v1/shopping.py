# api/v1/shopping.py
from __future__ import annotations

from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Response, status

from core import session as ss
from core.models.shopping import ShoppingList
from core.shopping_list import export_filename, export_list
from services.store import DEFAULT_SESSION, SessionStore, get_store

router = APIRouter()


def _get_list(store: SessionStore, session_id: str, list_index: int) -> ShoppingList:
    lists = store.get(session_id).shopping_lists
    if not 0 <= list_index < len(lists):
        raise HTTPException(status_code=404, detail="Shopping list not found")
    return lists[list_index]


@router.post(
    "",
    response_model=ShoppingList,
    status_code=status.HTTP_201_CREATED,
    summary="Build a shopping list from the current meal",
)
async def create_list(
    session_id: str = DEFAULT_SESSION,
    store: SessionStore = Depends(get_store),
) -> ShoppingList:
    try:
        state = ss.add_shopping_list(store.get(session_id))
    except ss.NoCurrentMeal as exc:
        raise HTTPException(status_code=404, detail="No current meal") from exc
    return store.put(session_id, state).shopping_lists[-1]


@router.get("", response_model=list[ShoppingList])
async def list_lists(
    session_id: str = DEFAULT_SESSION,
    store: SessionStore = Depends(get_store),
) -> list[ShoppingList]:
    return list(store.get(session_id).shopping_lists)


@router.post("/{list_index}/items/{item_index}/toggle", response_model=ShoppingList)
async def toggle_item(
    list_index: int,
    item_index: int,
    session_id: str = DEFAULT_SESSION,
    store: SessionStore = Depends(get_store),
) -> ShoppingList:
    try:
        state = ss.toggle_list_item(store.get(session_id), list_index, item_index)
    except IndexError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return store.put(session_id, state).shopping_lists[list_index]


@router.get("/{list_index}/export", response_class=Response)
async def export(
    list_index: int,
    session_id: str = DEFAULT_SESSION,
    store: SessionStore = Depends(get_store),
) -> Response:
    shopping_list = _get_list(store, session_id, list_index)
    filename = export_filename(shopping_list)
    return Response(
        content=export_list(shopping_list).encode("utf-8"),
        media_type="text/plain; charset=utf-8",
        headers={"Content-Disposition": f"attachment; filename*=UTF-8''{quote(filename)}"},
    )
