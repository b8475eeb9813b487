"""Appointment booking routes."""

from fastapi import APIRouter, Depends

from api.dependencies import AppContext, get_context
from models.database import APPOINTMENTS
from schemas import Appointment, AppointmentRequest
from services.email_templates import APPOINTMENT_SUBJECT, appointment_email
from utils.errors import DeliveryFailed, StorageUnavailable
from utils.helpers import format_response
from utils.logger import setup_logger

logger = setup_logger(__name__)

router = APIRouter(tags=["appointments"])


@router.post("/book-appointment")
async def book_appointment(request: AppointmentRequest, ctx: AppContext = Depends(get_context)):
    """Store an appointment and send the confirmation email."""
    logger.info(f"Received appointment request for {request.email}")

    appointment = Appointment(**request.model_dump())
    try:
        inserted_id = await ctx.database.insert_one(APPOINTMENTS, appointment.model_dump())
        logger.info(f"Appointment saved: {inserted_id}")
    except StorageUnavailable as e:
        logger.error(f"Error saving appointment: {e}")
        raise StorageUnavailable("Failed to save appointment") from e

    html_body = appointment_email(request.name, request.date, request.time, request.phone)
    try:
        await ctx.mailer.send(request.email, APPOINTMENT_SUBJECT, html_body)
    except DeliveryFailed as e:
        logger.error(f"Error sending appointment email: {e}")
        raise DeliveryFailed("Failed to book appointment") from e

    return format_response("Appointment booked successfully!")
