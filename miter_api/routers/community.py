from __future__ import annotations

import logging
import sqlite3

from fastapi import APIRouter, Depends, HTTPException, status

from ..adapters.storage import SubmissionStore, get_store
from ..schemas import FeedbackRequest, MessageResponse, SubscribeRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["community"])


@router.post("/feedback", response_model=MessageResponse)
def submit_feedback(body: FeedbackRequest, store: SubmissionStore = Depends(get_store)) -> MessageResponse:
    if not body.message.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Message cannot be empty")
    try:
        store.add_feedback(body.message, name=body.name, email=body.email)
    except sqlite3.Error as exc:
        logger.exception("Database error while storing feedback")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal Server Error") from exc
    return MessageResponse(message="Feedback sent successfully!")


@router.post("/subscribe", response_model=MessageResponse)
def subscribe(body: SubscribeRequest, store: SubmissionStore = Depends(get_store)) -> MessageResponse:
    email = body.email.strip()
    if "@" not in email:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid email address")
    try:
        store.add_subscriber(email)
    except sqlite3.Error as exc:
        logger.exception("Database error while storing subscriber")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal Server Error") from exc
    return MessageResponse(message="Subscribed successfully!")
