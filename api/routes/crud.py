"""Router factory for the standard entity endpoints.

Every entity exposes the same REST surface under ``/api/<Entity>``:

    GET    ""            list (active only unless ?include_inactive=true)
    GET    "/{id}"       get by id
    POST   ""            create (201)
    PUT    "/{id}"       full update, body id must match the path
    PATCH  ""            partial update, id in the body
    DELETE "/active"     toggle the active flag, body {id, active}
    DELETE "/{id}"       hard delete

Route ordering note: "/active" is registered before "/{entity_id}" so the
literal segment wins.

Endpoints are plain closures renamed per entity, so rate-limit keys and
OpenAPI operation ids stay unique across routers.
"""

from collections.abc import Callable
from typing import Any

from fastapi import APIRouter, Request

from core.database import DbSession
from core.ratelimit import API_LIMIT, WRITE_LIMIT, limiter
from schemas import OperationResult, StatusChange
from services.base import EntityService
from services.exceptions import ValidationError

NOT_FOUND = {404: {"description": "Entity not found"}}
INVALID = {400: {"description": "Invalid input"}}


def _endpoint(
    func: Callable[..., Any], name: str, limit: str
) -> Callable[..., Any]:
    func.__name__ = name
    func.__qualname__ = name
    return limiter.limit(limit)(func)


def build_crud_router(
    service: EntityService,
    *,
    path: str,
    update_schema: type | None = None,
    patch_schema: type | None = None,
) -> APIRouter:
    """Build the standard router for one entity.

    Args:
        service: Configured entity service.
        path: URL segment after ``/api/``, e.g. ``"Center"``.
        update_schema: PUT body. Omitted for append-only entities.
        patch_schema: PATCH body. PATCH is only exposed when given.
    """
    router = APIRouter(prefix=f"/api/{path}", tags=[path])
    name = service.log_name
    entity = service.entity_name
    create_schema = service.create_schema
    response_schema = service.response_schema

    async def list_entities(
        request: Request, db: DbSession, include_inactive: bool = False
    ) -> list[Any]:
        return await service.get_all(db, include_inactive=include_inactive)

    router.add_api_route(
        "",
        _endpoint(list_entities, f"list_{name}", API_LIMIT),
        methods=["GET"],
        response_model=list[response_schema],
        summary=f"List {entity}",
    )

    async def get_entity(request: Request, entity_id: int, db: DbSession) -> Any:
        return await service.get_by_id(db, entity_id)

    router.add_api_route(
        "/{entity_id}",
        _endpoint(get_entity, f"get_{name}", API_LIMIT),
        methods=["GET"],
        response_model=response_schema,
        responses={**NOT_FOUND, **INVALID},
        summary=f"Get {entity} by id",
    )

    async def create_entity(
        request: Request, body: create_schema, db: DbSession
    ) -> Any:
        return await service.create(db, body)

    router.add_api_route(
        "",
        _endpoint(create_entity, f"create_{name}", WRITE_LIMIT),
        methods=["POST"],
        response_model=response_schema,
        status_code=201,
        responses=INVALID,
        summary=f"Create {entity}",
    )

    if service.append_only:
        return router

    if update_schema is not None:

        async def update_entity(
            request: Request, entity_id: int, body: update_schema, db: DbSession
        ) -> Any:
            if body.id != entity_id:
                raise ValidationError(
                    "id", f"Body id {body.id} does not match path id {entity_id}"
                )
            return await service.update(db, body)

        router.add_api_route(
            "/{entity_id}",
            _endpoint(update_entity, f"update_{name}", WRITE_LIMIT),
            methods=["PUT"],
            response_model=response_schema,
            responses={**NOT_FOUND, **INVALID},
            summary=f"Replace {entity}",
        )

    if patch_schema is not None:

        async def patch_entity(
            request: Request, body: patch_schema, db: DbSession
        ) -> Any:
            return await service.patch(db, body)

        router.add_api_route(
            "",
            _endpoint(patch_entity, f"patch_{name}", WRITE_LIMIT),
            methods=["PATCH"],
            response_model=response_schema,
            responses={**NOT_FOUND, **INVALID},
            summary=f"Partially update {entity}",
        )

    if service.has_active_flag:

        async def set_entity_active(
            request: Request, body: StatusChange, db: DbSession
        ) -> OperationResult:
            await service.set_active(db, body.id, body.active)
            state = "activated" if body.active else "deactivated"
            return OperationResult(success=True, message=f"{entity} {state}")

        router.add_api_route(
            "/active",
            _endpoint(set_entity_active, f"set_{name}_active", WRITE_LIMIT),
            methods=["DELETE"],
            response_model=OperationResult,
            responses={**NOT_FOUND, **INVALID},
            summary=f"Activate or deactivate {entity}",
        )

    async def delete_entity(
        request: Request, entity_id: int, db: DbSession
    ) -> OperationResult:
        await service.delete(db, entity_id)
        return OperationResult(success=True, message=f"{entity} deleted")

    router.add_api_route(
        "/{entity_id}",
        _endpoint(delete_entity, f"delete_{name}", WRITE_LIMIT),
        methods=["DELETE"],
        response_model=OperationResult,
        responses={**NOT_FOUND, **INVALID},
        summary=f"Delete {entity}",
    )

    return router
