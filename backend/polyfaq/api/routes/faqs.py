# polyfaq/api/routes/faqs.py
from typing import Dict, List
from fastapi import APIRouter, Depends, Query, Request, status
from pydantic import BaseModel

from polyfaq.services.faq_service import FAQService

router = APIRouter()

# --- Schemas ---

class FAQCreate(BaseModel):
    # Presence/blank checks happen in FAQService so they map to a 400
    question: str | None = None
    answer: str | None = None

class FAQView(BaseModel):
    question: str
    answer: str

class FAQTranslation(BaseModel):
    question: str | None = None
    answer: str | None = None

class FAQResponse(BaseModel):
    id: int
    question: str
    answer: str
    translations: Dict[str, FAQTranslation]

# --- Dependency ---

def get_faq_service(request: Request) -> FAQService:
    return request.app.state.faq_service

# --- Routes ---

@router.get("", response_model=List[FAQView])
async def list_faqs(
    lang: str | None = Query(None, description="Language tag, defaults to en"),
    service: FAQService = Depends(get_faq_service),
):
    return await service.list_faqs(lang)

@router.post("", response_model=FAQResponse, status_code=status.HTTP_201_CREATED)
async def create_faq(
    body: FAQCreate,
    service: FAQService = Depends(get_faq_service),
):
    faq = await service.create_faq(body.question, body.answer)
    return FAQResponse.model_validate(faq.to_dict())
