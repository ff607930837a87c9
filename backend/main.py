"""
FastAPI backend service for statement conversion.
"""
from fastapi import FastAPI, File, UploadFile, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
import logging
from typing import List

from applecard_csv import parse_statements, to_csv

app = FastAPI(title="Apple Card CSV", version="1.0.0")

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173", "http://localhost:3000"],  # Vite and other dev servers
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"message": "Apple Card CSV API", "status": "healthy"}


@app.post("/parse")
async def parse_pdfs(files: List[UploadFile] = File(...), format: str = "json"):
    """
    Parse uploaded statements and return their transactions sorted by date.

    Args:
        files: Uploaded PDF files
        format: "json" (default) or "csv"

    Returns:
        Transactions as JSON or CSV
    """
    if format not in ("json", "csv"):
        raise HTTPException(status_code=400, detail=f"Unsupported format: {format}")

    for file in files:
        if not (file.filename or "").lower().endswith('.pdf'):
            raise HTTPException(status_code=400, detail=f"File must be a PDF: {file.filename}")

    statements = [await file.read() for file in files]
    logger.info(f"Processing {len(statements)} statement(s)")

    try:
        transactions = parse_statements(statements)
    except Exception as e:
        logger.error(f"Error parsing statements: {e}")
        raise HTTPException(status_code=500, detail=f"Error parsing PDF: {str(e)}")

    logger.info(f"Successfully parsed statements: {len(transactions)} transactions found")

    if format == "csv":
        return PlainTextResponse(to_csv(transactions), media_type="text/csv")

    return JSONResponse(content={
        "success": True,
        "data": [t.to_record() for t in transactions],
        "summary": {
            "statements_count": len(statements),
            "transactions_count": len(transactions)
        }
    })


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
