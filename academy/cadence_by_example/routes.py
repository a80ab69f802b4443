# Cadence by Example page, filled from our own JSON API
import httpx
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from academy.deps import get_http_client
from academy.loaders import load_cadence_by_example
from academy.templating import templates

router = APIRouter()

@router.get("/cadence-by-example", response_class=HTMLResponse)
async def cadence_by_example(request: Request, client: httpx.AsyncClient = Depends(get_http_client)):
    data = await load_cadence_by_example(client)
    return templates.TemplateResponse(request, "cadence_by_example.html", data)
