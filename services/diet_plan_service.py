"""Fixed meal plans keyed by goal and diet preference."""

from typing import Dict, Tuple, Union

from schemas.enums import DietPreference, Goal

DEFAULT_DIET_PLAN = "<p>No specific plan selected.</p>"

MealSchedule = Tuple[Tuple[str, str, str], ...]


def _render_plan(title: str, meals: MealSchedule) -> str:
    items = "\n".join(
        f"    <li><strong>{time} - {label}:</strong> {description}</li>"
        for time, label, description in meals
    )
    return f"<h2>{title}</h2>\n<ul>\n{items}\n</ul>"


# (goal, vegetarian?) -> plan
_PLANS: Dict[Tuple[str, bool], str] = {
    (Goal.WEIGHT_LOSS.value, True): _render_plan(
        "Vegetarian Weight Loss Diet Plan",
        (
            ("7:00 AM", "Breakfast", "Oatmeal with fruits and a handful of nuts"),
            ("10:00 AM", "Snack", "Greek yogurt with honey"),
            ("1:00 PM", "Lunch", "Quinoa salad with mixed vegetables and a side of avocado"),
            ("4:00 PM", "Snack", "A small apple or a handful of almonds"),
            ("7:00 PM", "Dinner", "Steamed vegetables with tofu and a small portion of brown rice"),
            ("9:00 PM", "Snack (optional)", "A glass of warm skim milk"),
        ),
    ),
    (Goal.WEIGHT_LOSS.value, False): _render_plan(
        "Non-Vegetarian Weight Loss Diet Plan",
        (
            ("7:00 AM", "Breakfast", "Scrambled eggs with spinach and whole-grain toast"),
            ("10:00 AM", "Snack", "A boiled egg or a handful of nuts"),
            ("1:00 PM", "Lunch", "Grilled chicken breast with a side of steamed broccoli and quinoa"),
            ("4:00 PM", "Snack", "A small apple or a handful of almonds"),
            ("7:00 PM", "Dinner", "Grilled fish with a side of roasted vegetables"),
            ("9:00 PM", "Snack (optional)", "A glass of warm skim milk"),
        ),
    ),
    (Goal.MUSCLE_GAIN.value, True): _render_plan(
        "Vegetarian Muscle Gain Diet Plan",
        (
            ("7:00 AM", "Breakfast", "Smoothie with banana, spinach, almond milk, and protein powder"),
            ("10:00 AM", "Snack", "A handful of mixed nuts and a boiled egg"),
            ("1:00 PM", "Lunch", "Lentil curry with brown rice and a side of avocado"),
            ("4:00 PM", "Snack", "Greek yogurt with honey and a handful of granola"),
            ("7:00 PM", "Dinner", "Grilled tofu with sweet potatoes and steamed vegetables"),
            ("9:00 PM", "Snack (optional)", "A glass of warm skim milk with a tablespoon of peanut butter"),
        ),
    ),
    (Goal.MUSCLE_GAIN.value, False): _render_plan(
        "Non-Vegetarian Muscle Gain Diet Plan",
        (
            ("7:00 AM", "Breakfast", "Scrambled eggs with whole-grain toast and a side of avocado"),
            ("10:00 AM", "Snack", "A boiled egg or a handful of nuts"),
            ("1:00 PM", "Lunch", "Grilled salmon with brown rice and a side of steamed vegetables"),
            ("4:00 PM", "Snack", "Protein shake with banana and almond milk"),
            ("7:00 PM", "Dinner", "Grilled chicken breast with sweet potatoes and roasted vegetables"),
            ("9:00 PM", "Snack (optional)", "A glass of warm skim milk with a tablespoon of peanut butter"),
        ),
    ),
    (Goal.MAINTAIN_WEIGHT.value, True): _render_plan(
        "Vegetarian Maintain Weight Diet Plan",
        (
            ("7:00 AM", "Breakfast", "Smoothie with spinach, banana, and almond milk"),
            ("10:00 AM", "Snack", "A handful of mixed nuts"),
            ("1:00 PM", "Lunch", "Whole-grain pasta with pesto and a side of avocado"),
            ("4:00 PM", "Snack", "Greek yogurt with honey"),
            ("7:00 PM", "Dinner", "Grilled vegetables with quinoa and a side of hummus"),
            ("9:00 PM", "Snack (optional)", "A glass of warm skim milk"),
        ),
    ),
    (Goal.MAINTAIN_WEIGHT.value, False): _render_plan(
        "Non-Vegetarian Maintain Weight Diet Plan",
        (
            ("7:00 AM", "Breakfast", "Scrambled eggs with whole-grain toast and a side of avocado"),
            ("10:00 AM", "Snack", "A boiled egg or a handful of nuts"),
            ("1:00 PM", "Lunch", "Grilled chicken sandwich with avocado and a side of mixed greens"),
            ("4:00 PM", "Snack", "A small apple or a handful of almonds"),
            ("7:00 PM", "Dinner", "Grilled fish with a side of roasted vegetables"),
            ("9:00 PM", "Snack (optional)", "A glass of warm skim milk"),
        ),
    ),
}


def generate_diet_plan(
    goal: Union[Goal, str],
    diet_preference: Union[DietPreference, str],
) -> str:
    """Return the HTML meal plan for a goal and diet preference.

    Any goal outside the table (including ``other``) gets DEFAULT_DIET_PLAN.
    Any preference other than ``vegetarian`` gets the non-vegetarian plan.
    """
    goal_value = goal.value if isinstance(goal, Goal) else goal
    preference = diet_preference.value if isinstance(diet_preference, DietPreference) else diet_preference
    vegetarian = preference == DietPreference.VEGETARIAN.value
    return _PLANS.get((goal_value, vegetarian), DEFAULT_DIET_PLAN)
