from fastapi import Request

from app.services.records import RecordsStore


def get_records(request: Request) -> RecordsStore:
    return request.app.state.records
