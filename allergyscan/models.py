from pydantic import BaseModel
from typing import Optional, List


class ScanTextRequest(BaseModel):
    text: str
    user_allergies: List[str] = []


class AllergenCheckRequest(BaseModel):
    ingredients: List[str]
    user_allergies: List[str] = []


class ScanResponse(BaseModel):
    ingredients: List[str]
    warnings: List[str]


class AllergenCheckResponse(BaseModel):
    warnings: List[str]


class AllergenListResponse(BaseModel):
    common: List[str]
    known: List[str]


class ScanResult(BaseModel):
    id: str
    user_id: Optional[str] = None
    timestamp: int
    extracted_text: str
    ingredients: List[str]
    warnings: List[str]
