from typing import Annotated

import httpx
from fastapi import Depends
from starlette.requests import HTTPConnection

from app.logic.auth import TokenCache


async def get_http_client(request: HTTPConnection) -> httpx.AsyncClient:
    return request.state.http_client


async def get_token_cache(request: HTTPConnection) -> TokenCache:
    return request.state.token_cache


ActiveClient = Annotated[httpx.AsyncClient, Depends(get_http_client)]

ActiveTokenCache = Annotated[TokenCache, Depends(get_token_cache)]
