"""
Coffee endpoints for API v1.

These routes expose CRUD operations on the coffee collection:

* ``GET /coffees`` lists every coffee in store order.
* ``GET /coffees/{id}`` returns one coffee or 404.
* ``POST /coffees`` creates a coffee, generating its id when blank.
* ``PUT /coffees/{id}`` updates the coffee (200) or creates it (201);
  the status code is the only signal of which happened.
* ``DELETE /coffees/{id}`` removes a coffee; deleting a missing id
  still answers 204.

Storage errors are translated into HTTP responses here: validation
problems become 422, duplicate ids 409 and backend failures 503.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from coffee_api.app.core.dependencies import get_store
from coffee_api.app.core.exceptions import (
    CoffeeError,
    CoffeeStorageError,
    DuplicateCoffeeError,
)
from coffee_api.app.schemas.coffee import CoffeeCreate, CoffeeRead

router = APIRouter()


def _http_error(exc: CoffeeError) -> HTTPException:
    if isinstance(exc, DuplicateCoffeeError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
    if isinstance(exc, CoffeeStorageError):
        return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Coffee storage unavailable")
    return HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc))


@router.get("", response_model=List[CoffeeRead])
async def list_coffees(store=Depends(get_store)) -> List[CoffeeRead]:
    """Return all coffees."""
    try:
        return await store.list_coffees()
    except CoffeeError as exc:
        raise _http_error(exc) from exc


@router.get("/{coffee_id}", response_model=CoffeeRead)
async def get_coffee(coffee_id: str, store=Depends(get_store)) -> CoffeeRead:
    """Retrieve a single coffee by id.

    Returns HTTP 404 if no coffee has this id.
    """
    try:
        coffee = await store.get_coffee(coffee_id)
    except CoffeeError as exc:
        raise _http_error(exc) from exc
    if coffee is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Coffee not found")
    return coffee


@router.post("", response_model=CoffeeRead, status_code=status.HTTP_201_CREATED)
async def create_coffee(coffee_in: CoffeeCreate, store=Depends(get_store)) -> CoffeeRead:
    """Create a new coffee."""
    try:
        return await store.create_coffee(coffee_in)
    except CoffeeError as exc:
        raise _http_error(exc) from exc


@router.put(
    "/{coffee_id}",
    response_model=CoffeeRead,
    responses={status.HTTP_201_CREATED: {"model": CoffeeRead, "description": "Coffee created"}},
)
async def put_coffee(
    coffee_id: str,
    coffee_in: CoffeeCreate,
    response: Response,
    store=Depends(get_store),
) -> CoffeeRead:
    """Update the coffee with this id, or create one if it does not exist."""
    try:
        coffee, result = await store.upsert_coffee(coffee_id, coffee_in)
    except CoffeeError as exc:
        raise _http_error(exc) from exc
    response.status_code = result.status_code
    return coffee


@router.delete("/{coffee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_coffee(coffee_id: str, store=Depends(get_store)) -> None:
    """Delete a coffee.  Missing ids are ignored."""
    try:
        await store.delete_coffee(coffee_id)
    except CoffeeError as exc:
        raise _http_error(exc) from exc
    return None
