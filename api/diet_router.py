"""Diet plan routes."""

from fastapi import APIRouter, Depends

from api.dependencies import AppContext, get_context
from models.database import DIET_PLANS
from schemas import DietPlanRecord, DietPlanRequest
from services.diet_plan_service import generate_diet_plan
from services.email_templates import DIET_PLAN_SUBJECT, diet_plan_email
from utils.errors import DeliveryFailed, StorageUnavailable
from utils.helpers import format_response
from utils.logger import setup_logger

logger = setup_logger(__name__)

router = APIRouter(tags=["diet"])


@router.post("/send-diet-plan")
async def send_diet_plan(request: DietPlanRequest, ctx: AppContext = Depends(get_context)):
    """Generate a meal plan, store it, then email it.

    The stored record is kept even when the email fails.
    """
    logger.info(f"Received diet plan request for {request.email}")

    diet_plan = generate_diet_plan(request.goal, request.diet_preference)
    record = DietPlanRecord(**request.model_dump(), diet_plan=diet_plan)

    try:
        inserted_id = await ctx.database.insert_one(DIET_PLANS, record.model_dump(by_alias=True))
        logger.info(f"Diet plan saved: {inserted_id}")
    except StorageUnavailable as e:
        logger.error(f"Error saving diet plan: {e}")
        raise StorageUnavailable("Failed to save diet plan") from e

    html_body = diet_plan_email(
        name=request.name,
        goal=request.goal.value,
        height=request.height,
        weight=request.weight,
        exercise_level=request.exercise_level,
        diet_preference=request.diet_preference.value,
        diet_plan=diet_plan,
    )
    try:
        await ctx.mailer.send(request.email, DIET_PLAN_SUBJECT, html_body)
    except DeliveryFailed as e:
        logger.error(f"Error sending diet plan email: {e}")
        raise DeliveryFailed("Failed to send email") from e

    return format_response("Diet plan sent to your email!")
