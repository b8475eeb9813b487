"""HTML bodies for outgoing emails."""

from html import escape
from typing import Iterable

SIGNATURE = "<p>Best regards,<br>HealthConnect Team</p>"

DIET_PLAN_SUBJECT = "Your Personalized Diet Plan"
APPOINTMENT_SUBJECT = "Appointment Confirmation"
WELCOME_SUBJECT = "Welcome to HealthConnect"


def diet_plan_email(
    name: str,
    goal: str,
    height: float,
    weight: float,
    exercise_level: str,
    diet_preference: str,
    diet_plan: str,
) -> str:
    # diet_plan is generated markup and is inserted as-is
    return f"""
<h1>Hello {escape(name)},</h1>
<p>Here is your personalized diet plan based on your goal: <strong>{escape(goal)}</strong></p>
<p>Height: {height:g} cm</p>
<p>Weight: {weight:g} kg</p>
<p>Exercise Level: {escape(exercise_level)}</p>
<p>Diet Preference: {escape(diet_preference)}</p>
{diet_plan}
{SIGNATURE}
"""


def appointment_email(name: str, date: str, time: str, phone: str) -> str:
    return f"""
<h1>Hello {escape(name)},</h1>
<p>Your appointment has been booked successfully!</p>
<p>Date: {escape(date)}</p>
<p>Time: {escape(time)}</p>
<p>We will contact you at {escape(phone)} for further details.</p>
{SIGNATURE}
"""


def welcome_email(first_name: str, last_name: str, goals: Iterable[str]) -> str:
    goal_list = ", ".join(escape(goal) for goal in goals)
    return f"""
<h1>Hello {escape(first_name)} {escape(last_name)},</h1>
<p>Thank you for signing up with HealthConnect!</p>
<p>Your goals: <strong>{goal_list}</strong></p>
<p>We will contact you shortly to help you get started.</p>
{SIGNATURE}
"""
