"""Canned chatbot replies."""

HELLO_RESPONSE = "Hello! Welcome to HealthConnect. How can I assist you today?"

HI_RESPONSE = "Hi there! How can I help you?"

WORKOUT_SPLITS_RESPONSE = """Here are some popular workout splits:
1. **Full Body (3 days/week)**: Work all major muscle groups in each session.
2. **Upper/Lower (4 days/week)**: Alternate between upper and lower body workouts.
3. **Push/Pull/Legs (6 days/week)**: Focus on pushing, pulling, and leg exercises.
Which one are you interested in?"""

DIET_PLANS_RESPONSE = """Here are some diet plans based on your goal:
1. **Weight Loss**: High-protein, low-carb, and calorie-deficit meals.
2. **Muscle Gain**: High-protein, moderate-carb, and calorie-surplus meals.
3. **Vegetarian**: Plant-based protein sources like beans, lentils, and tofu.
What's your goal?"""

FITNESS_ADVICE_RESPONSE = """Here are some general fitness tips:
1. **Workout Frequency**: 3-5 times per week for optimal results.
2. **Build Muscle**: Focus on progressive overload and proper nutrition.
3. **Improve Cardio**: Incorporate HIIT or steady-state cardio into your routine.
Do you have a specific question?"""

APOLOGY_RESPONSE = "Sorry, I couldn't fetch the information at the moment. Please try again later."
