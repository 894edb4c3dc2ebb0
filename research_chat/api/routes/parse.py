"""Stateless parser endpoints for AI response text."""

from fastapi import APIRouter, Request

from research_chat.api.models.research import LinksResponse, LinkWithFavicon, ParseRequest, TitlesResponse
from research_chat.parsing.links import extract_links, favicon_url

router = APIRouter(prefix="/api/parse", tags=["parse"])


@router.post("/titles", response_model=TitlesResponse)
async def parse_titles(body: ParseRequest, request: Request) -> TitlesResponse:
    extractor = request.app.state.chat_service.extractor
    return TitlesResponse(suggestions=extractor.extract(body.text))


@router.post("/links", response_model=LinksResponse)
async def parse_links(body: ParseRequest) -> LinksResponse:
    links = [
        LinkWithFavicon(label=link.label, href=link.href, favicon=favicon_url(link.href))
        for link in extract_links(body.text)
    ]
    return LinksResponse(links=links)
