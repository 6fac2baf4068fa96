# supplyhub/api/deps.py
from fastapi import HTTPException, Request

from supplyhub.domain.errors import NotFoundError, ValidationError
from supplyhub.marketplace import Marketplace


def get_marketplace(request: Request) -> Marketplace:
    return request.app.state.marketplace


def not_found(e: NotFoundError) -> HTTPException:
    return HTTPException(status_code=404, detail=str(e))


def bad_request(e: ValidationError) -> HTTPException:
    return HTTPException(status_code=400, detail=e.message)
