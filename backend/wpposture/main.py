from typing import Union

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from wpposture.models.schemas import ScanRequest, SecurityReport, SkippedScan, TechStack
from wpposture.core.engine import run_wordpress_scan
from wpposture.core.errors import ScanError
from wpposture.core.techstack import detect_tech_stack

app = FastAPI(title="WordPress Security Posture API", version="0.1.0")

origins = ["http://localhost:3000", "http://127.0.0.1:3000"]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/health")
def health():
    return {"status": "ok"}

@app.post("/wordpress-security", response_model=Union[SecurityReport, SkippedScan])
async def wordpress_security(req: ScanRequest):
    try:
        return await run_wordpress_scan(str(req.url))
    except ScanError as e:
        raise HTTPException(status_code=502, detail=str(e))

@app.post("/tech-stack", response_model=TechStack)
async def tech_stack(req: ScanRequest):
    try:
        return await detect_tech_stack(str(req.url))
    except ScanError as e:
        raise HTTPException(status_code=502, detail=str(e))
