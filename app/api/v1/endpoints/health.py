from fastapi import APIRouter, Depends, status

from app.api.deps import get_records
from app.services.records import RecordsStore

router = APIRouter(tags=["Health"])


@router.get("/health", status_code=status.HTTP_200_OK)
async def health(records: RecordsStore = Depends(get_records)):
    return {"status": "ok", "storage": records.storage.name}
