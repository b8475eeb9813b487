"""Account and newsletter routes."""

from fastapi import APIRouter, Depends

from api.dependencies import AppContext, get_context
from models.database import SUBSCRIPTIONS, USERS
from schemas import GetStartedRequest, SignInRequest, SubscribeRequest, Subscription, User
from services.email_templates import WELCOME_SUBJECT, welcome_email
from utils.errors import DeliveryFailed, NotFound, StorageUnavailable, Unauthorized, ValidationConflict
from utils.helpers import format_response, serialize_document
from utils.logger import setup_logger
from utils.security import hash_password_async, verify_password_async

logger = setup_logger(__name__)

router = APIRouter(tags=["accounts"])


@router.post("/api/subscribe", status_code=201)
async def subscribe(request: SubscribeRequest, ctx: AppContext = Depends(get_context)):
    """Subscribe an email to the newsletter, once."""
    try:
        existing = await ctx.database.find_one(SUBSCRIPTIONS, {"email": request.email})
        if existing:
            raise ValidationConflict("Email already subscribed.")

        subscription = Subscription(email=request.email)
        inserted_id = await ctx.database.insert_one(SUBSCRIPTIONS, subscription.model_dump(by_alias=True))
        logger.info(f"Subscription saved: {inserted_id}")
    except StorageUnavailable as e:
        logger.error(f"Error saving subscription: {e}")
        raise StorageUnavailable("Something went wrong. Please try again.") from e

    return format_response("Thank you for subscribing!")


@router.post("/get-started")
async def get_started(request: GetStartedRequest, ctx: AppContext = Depends(get_context)):
    """Register a user and send the welcome email."""
    logger.info(f"Received sign-up request for {request.email}")

    hashed_password = await hash_password_async(request.password)
    user = User(
        first_name=request.first_name,
        last_name=request.last_name,
        email=request.email,
        phone=request.phone,
        password=hashed_password,
        goals=request.goals,
    )

    try:
        inserted_id = await ctx.database.insert_one(USERS, user.model_dump(by_alias=True))
        logger.info(f"User saved: {inserted_id}")
    except StorageUnavailable as e:
        logger.error(f"Error saving user: {e}")
        raise StorageUnavailable("Failed to sign up") from e

    try:
        await ctx.mailer.send(
            request.email,
            WELCOME_SUBJECT,
            welcome_email(request.first_name, request.last_name, request.goals),
        )
    except DeliveryFailed as e:
        logger.error(f"Error sending welcome email: {e}")
        raise DeliveryFailed("Failed to send welcome email") from e

    return format_response("Thank you for signing up!")


@router.post("/signin")
async def signin(request: SignInRequest, ctx: AppContext = Depends(get_context)):
    """Check credentials and return the stored user record."""
    logger.info(f"Received sign-in request for {request.email}")

    try:
        user = await ctx.database.find_one(USERS, {"email": request.email})
    except StorageUnavailable as e:
        logger.error(f"Error during sign-in: {e}")
        raise StorageUnavailable("Failed to sign in") from e

    if not user:
        logger.info(f"User not found: {request.email}")
        raise NotFound("User not found")

    if not await verify_password_async(request.password, user.get("password", "")):
        logger.info(f"Invalid password for user: {request.email}")
        raise Unauthorized("Invalid email or password")

    logger.info(f"Sign-in successful for user: {request.email}")
    exclude = () if ctx.settings.signin_include_password_hash else ("password",)
    return format_response("Sign-in successful!", user=serialize_document(user, exclude=exclude))
