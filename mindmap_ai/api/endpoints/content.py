from typing import List

from fastapi import APIRouter

from mindmap_ai.schemas.common import FAQ, UseCase
from mindmap_ai.services.content import FAQS, USE_CASES

router = APIRouter(tags=["Content"])


@router.get("/faq", response_model=List[FAQ])
async def get_faq():
    return FAQS


@router.get("/use-cases", response_model=List[UseCase])
async def get_use_cases():
    return USE_CASES
