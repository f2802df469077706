"""
Prompt builders for the AI plan service.

Every prompt asks for a single JSON object; the matching parsers live in
:mod:`fitform.services.ai_parsing`.
"""

import json
from typing import Any, Optional

from fitform.schemas.form_analysis import CameraPosition
from fitform.schemas.plan import WorkoutPlan
from fitform.schemas.profile import UserProfile

PLAN_SYSTEM_PROMPT = (
    "You are an expert fitness trainer and exercise physiologist. Create personalized, safe, "
    "and effective workout plans based on user profiles. Always respond in valid JSON format."
)

CUSTOMIZE_SYSTEM_PROMPT = (
    "You are an expert fitness trainer and exercise physiologist. When users request workout plan "
    "changes, you must evaluate if the change is harmful to their development. If harmful, provide a "
    "clear warning and explanation. If safe, create a modified plan. Always respond in valid JSON format."
)

CAMERA_SYSTEM_PROMPT = (
    "You are an expert in exercise biomechanics and video analysis. Provide precise camera "
    "positioning guidance for optimal form assessment."
)

FORM_SYSTEM_PROMPT = (
    "You are an expert fitness trainer specializing in form correction and injury prevention. "
    "Analyze exercise videos with precision and provide actionable feedback."
)

_PLAN_JSON_FORMAT = """{
    "title": "string",
    "description": "string",
    "durationWeeks": number,
    "workouts": [
        {
            "day": "string (e.g., Monday, Day 1)",
            "title": "string",
            "estimatedDuration": number (minutes),
            "exercises": [
                {
                    "name": "string",
                    "sets": number,
                    "reps": "string (e.g., '8-12', '30 seconds')",
                    "restTime": number (seconds),
                    "notes": "string or null",
                    "muscleGroups": ["array of strings"],
                    "difficulty": "string"
                }
            ]
        }
    ]
}"""


def _join(values: list[Any]) -> str:
    return ", ".join(getattr(v, "value", str(v)) for v in values)


def frequency_instruction(profile: UserProfile) -> str:
    days = profile.workout_frequency.days_per_week
    if days == 7:
        return (
            "The user wants to work out every day. Create a smart 7-day routine with active recovery "
            "days. Include lighter activities like yoga, stretching, or light cardio on recovery days. "
            "Never have 7 consecutive intense training days."
        )
    return f"Create exactly {days} workout days per week."


def build_workout_plan_prompt(profile: UserProfile, user_notes: Optional[str] = None) -> str:
    restrictions = _join(profile.restrictions) if profile.restrictions else "None"
    notes_section = f"\nAdditional Notes: {user_notes}\n" if user_notes else ""
    return f"""Create a personalized workout plan with the following specifications:

User Profile:
- Age: {profile.age}
- Fitness Level: {profile.fitness_level.value}
- Goals: {_join(profile.goals)}
- Workout Frequency: {profile.workout_frequency.value}
- Restrictions: {restrictions}
- Preferred Workout Types: {_join(profile.preferred_workout_types)}
- Available Equipment: {_join(profile.available_equipment)}
{notes_section}
IMPORTANT: {frequency_instruction(profile)}

Create a comprehensive workout plan with:
- Appropriate exercises for their level and goals
- Proper progression and rest days (if not working out 7 days)
- Clear sets, reps, and rest periods

Respond in JSON format:
{_PLAN_JSON_FORMAT}"""


def plan_to_prompt_dict(plan: WorkoutPlan) -> dict[str, Any]:
    """Render *plan* in the same shape the model is asked to return."""
    return {
        "title": plan.title,
        "description": plan.description,
        "durationWeeks": plan.duration_weeks,
        "workouts": [
            {
                "day": w.day,
                "title": w.title,
                "estimatedDuration": w.estimated_duration,
                "exercises": [
                    {
                        "name": e.name,
                        "sets": e.sets,
                        "reps": e.reps,
                        "restTime": e.rest_time,
                        "notes": e.notes,
                        "muscleGroups": e.muscle_groups,
                        "difficulty": e.difficulty,
                    }
                    for e in w.exercises
                ],
            }
            for w in plan.workouts
        ],
    }


def build_customization_prompt(plan: WorkoutPlan, request: str) -> str:
    current = json.dumps(plan_to_prompt_dict(plan), indent=2)
    return f"""The user wants to modify their current workout plan.

User request: "{request}"

Current plan:
{current}

First decide whether the requested change would be harmful to the user's development or safety
(for example removing all rest days, training the same muscle group to failure every day, or
dropping warm-ups for heavy lifts).

Respond in JSON format:
{{
    "isHarmful": boolean,
    "warningMessage": "string or null (required when isHarmful is true)",
    "explanation": "string explaining the decision or the changes made",
    "modifiedPlan": null or a complete plan in this format:
{_PLAN_JSON_FORMAT}
}}

When the change is harmful, set "modifiedPlan" to null."""


def build_camera_position_prompt(exercise_name: str) -> str:
    return f"""For the exercise "{exercise_name}", determine the OPTIMAL camera position for form analysis.

Consider:
- Which angle shows the most critical form elements
- What distance and height provides the clearest view
- How to frame the entire movement

Respond in JSON format with:
{{
    "angle": "Front View" | "Side View" | "Back View" | "45° Diagonal" | "Overhead View",
    "distance": "distance description",
    "height": "height description",
    "instructions": "clear, step-by-step setup instructions",
    "visualGuidePrompt": "a detailed prompt for generating an illustration showing camera placement"
}}"""


def build_form_analysis_prompt(exercise_name: str, camera_position: CameraPosition) -> str:
    return f"""Analyze this exercise form for: {exercise_name}
Camera Position: {camera_position.angle.value} at {camera_position.height}, {camera_position.distance}

Provide a detailed form analysis including:
1. Overall score (0-100)
2. General analysis summary
3. What they're doing well (strengths)
4. What needs improvement
5. Specific feedback for key aspects (back position, knee alignment, hip hinge, etc.)

Be encouraging but honest. Prioritize safety and injury prevention.

Respond in JSON format:
{{
    "overallScore": number,
    "analysis": "string",
    "strengths": ["array of strings"],
    "improvements": ["array of strings"],
    "detailedFeedback": [
        {{
            "aspect": "string",
            "rating": "Excellent" | "Good" | "Needs Improvement" | "Poor",
            "description": "string"
        }}
    ]
}}"""
