from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session

from airline_api.db.session import get_db

router = APIRouter()

@router.get("")
@router.get("/", include_in_schema=False)
def health(db: Session = Depends(get_db)):
    db.execute(text("SELECT 1"))
    return {"status": "ok"}
