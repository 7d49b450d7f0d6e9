"""
Mountain router.

The MountainRepository is injected via `get_mountain_repository`.  Swapping
the store (e.g. a fresh one per test) only requires overriding that single
dependency.

Endpoints
─────────
  POST  /                        Add a batch of mountains (409 on duplicate)
  GET   /mountains               Query mountains by query-string parameters
  PUT   /mountains/update/{id}   Replace the first mountain with that id
  PUT   /mountains/delete        Delete the first mountain with the id in the body

Malformed ``id`` / ``alt`` query values are not caught here; the resulting
``ValueError`` surfaces as a 500 from the server error middleware.
"""

import logging

from fastapi import APIRouter, Body, Depends, HTTPException, Request, Response, status

from mountains.dao.base import MountainRepository
from mountains.dependencies.dao import get_mountain_repository
from mountains.schemas.mountain import Mountain
from mountains.services.mountain import (
    add_mountains,
    dispatch_query,
    remove_mountain,
    update_mountain,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Mountains"])


@router.post(
    "/",
    status_code=status.HTTP_200_OK,
    summary="Add a batch of mountains",
    description=(
        "Inserts every mountain in the request body. If any of them is identical "
        "to a stored mountain the whole batch is rejected with 409."
    ),
    responses={409: {"description": "Batch contains a duplicate mountain"}},
)
def create_mountains(
    body: list[Mountain],
    repo: MountainRepository = Depends(get_mountain_repository),
) -> Response:
    """Insert a batch of mountains, all or nothing."""
    logger.info("POST / called with %d mountain(s)", len(body))
    if not add_mountains(body, repo=repo):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Batch contains a mountain that already exists.",
        )
    return Response(status_code=status.HTTP_200_OK)


@router.get(
    "/mountains",
    response_model=list[Mountain],
    summary="Query mountains",
    description=(
        "Filters by `id`, `country`, `range`, `name`, `alt` (minimum altitude) "
        "or `north`. With no parameters every mountain is returned."
    ),
)
def get_mountains(
    request: Request,
    repo: MountainRepository = Depends(get_mountain_repository),
) -> list[Mountain]:
    """Dispatch the query-string parameters to a store query."""
    # First value wins when a key is repeated.
    params = {key: request.query_params.getlist(key)[0] for key in request.query_params.keys()}
    logger.info("GET /mountains called with %s", params)
    return dispatch_query(params, repo=repo)


@router.put(
    "/mountains/update/{mountain_id}",
    summary="Update a mountain",
    responses={404: {"description": "No mountain with that id"}},
)
def put_mountain(
    mountain_id: int,
    body: Mountain,
    repo: MountainRepository = Depends(get_mountain_repository),
) -> Response:
    """Replace the first mountain with *mountain_id* by the request body."""
    logger.info("PUT /mountains/update/%d called", mountain_id)
    if not update_mountain(mountain_id, body, repo=repo):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Mountain {mountain_id} not found.",
        )
    return Response(status_code=status.HTTP_200_OK)


@router.put(
    "/mountains/delete",
    summary="Delete a mountain",
    description="The request body is the bare JSON integer id of the mountain.",
    responses={404: {"description": "No mountain with that id"}},
)
def delete_mountain(
    mountain_id: int = Body(..., examples=[1]),
    repo: MountainRepository = Depends(get_mountain_repository),
) -> Response:
    """Delete the first mountain whose id is the request body."""
    logger.info("PUT /mountains/delete called for %d", mountain_id)
    if not remove_mountain(mountain_id, repo=repo):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Mountain {mountain_id} not found.",
        )
    return Response(status_code=status.HTTP_200_OK)
