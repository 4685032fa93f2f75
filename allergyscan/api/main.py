import logging
from typing import List

from fastapi import FastAPI, File, Form, HTTPException, UploadFile, Body
from fastapi.concurrency import run_in_threadpool

from allergyscan import config
from allergyscan.allergens import ALLERGEN_SYNONYMS, COMMON_ALLERGENS, check_for_allergens, normalize_allergy_set
from allergyscan.models import (
    AllergenCheckRequest,
    AllergenCheckResponse,
    AllergenListResponse,
    ScanResponse,
    ScanResult,
    ScanTextRequest,
)
from allergyscan.pipeline import process_text_for_allergens, scan_image

logging.basicConfig(level=config.LOG_LEVEL)

app = FastAPI(title="AllergyScan")


@app.get("/health")
def health():
    return {"status": "healthy"}


@app.get("/allergens", response_model=AllergenListResponse)
def list_allergens():
    return AllergenListResponse(common=COMMON_ALLERGENS, known=sorted(ALLERGEN_SYNONYMS.keys()))


@app.post("/scan/text", response_model=ScanResponse)
def scan_text(request: ScanTextRequest = Body(...)):
    result = process_text_for_allergens(request.text, normalize_allergy_set(request.user_allergies))
    return ScanResponse(**result)


@app.post("/scan/image", response_model=ScanResult)
async def scan_image_upload(file: UploadFile = File(...), user_allergies: List[str] = Form(None)):
    data = await file.read()
    if not data:
        raise HTTPException(status_code=400, detail="Uploaded image is empty")
    allergies = normalize_allergy_set(user_allergies or [])
    return await run_in_threadpool(scan_image, data, allergies)


@app.post("/allergens/check", response_model=AllergenCheckResponse)
def check_allergens(request: AllergenCheckRequest = Body(...)):
    warnings = check_for_allergens(request.ingredients, normalize_allergy_set(request.user_allergies))
    return AllergenCheckResponse(warnings=warnings)


def run():
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
