"""
User profile schemas.

A profile is collected once during onboarding and replaced wholesale on
edit.  ``ProfileForm`` mirrors the raw onboarding input (age typed as
text, restrictions as one comma-separated string) and refuses to build a
profile until every required step is filled in.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FitnessLevel(str, Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    ATHLETE = "Athlete"


class FitnessGoal(str, Enum):
    WEIGHT_LOSS = "Weight Loss"
    MUSCLE_GAIN = "Muscle Gain"
    STRENGTH = "Build Strength"
    ENDURANCE = "Improve Endurance"
    FLEXIBILITY = "Increase Flexibility"
    SPORTS = "Sports Performance"
    GENERAL = "General Fitness"


class WorkoutType(str, Enum):
    WEIGHTLIFTING = "Weightlifting"
    CARDIO = "Cardio"
    HIIT = "HIIT"
    YOGA = "Yoga"
    SPORTS = "Sports Training"
    CALISTHENICS = "Calisthenics"
    CROSSFIT = "CrossFit"


class Equipment(str, Enum):
    DUMBBELLS = "Dumbbells"
    BARBELL = "Barbell"
    KETTLEBELL = "Kettlebell"
    RESISTANCE_BANDS = "Resistance Bands"
    PULLUP_BAR = "Pull-up Bar"
    BENCH = "Bench"
    MACHINE = "Gym Machines"
    NONE = "No Equipment"


class WorkoutFrequency(str, Enum):
    TWO_DAYS = "2 days per week"
    THREE_DAYS = "3 days per week"
    FOUR_DAYS = "4 days per week"
    FIVE_DAYS = "5 days per week"
    SIX_DAYS = "6 days per week"
    SEVEN_DAYS = "7 days per week"

    @property
    def days_per_week(self) -> int:
        return int(self.value.split()[0])


class UserProfile(BaseModel):
    """Immutable user profile."""

    model_config = ConfigDict(frozen=True)

    name: str
    age: int = Field(..., ge=1, le=120)
    fitness_level: FitnessLevel = FitnessLevel.BEGINNER
    goals: list[FitnessGoal] = Field(default_factory=list)
    restrictions: list[str] = Field(default_factory=list)
    preferred_workout_types: list[WorkoutType] = Field(default_factory=list)
    available_equipment: list[Equipment] = Field(default_factory=list)
    workout_frequency: WorkoutFrequency = WorkoutFrequency.THREE_DAYS


class ProfileForm(BaseModel):
    """Raw onboarding / edit-profile input."""

    name: str = Field(..., min_length=1, max_length=100)
    age: str = Field(..., description="Age as typed; must be a whole number")
    fitness_level: FitnessLevel = FitnessLevel.BEGINNER
    goals: list[FitnessGoal] = Field(..., min_length=1)
    restrictions: str = Field("", max_length=1000, description="Comma-separated")
    preferred_workout_types: list[WorkoutType] = Field(..., min_length=1)
    available_equipment: list[Equipment] = Field(..., min_length=1)
    workout_frequency: WorkoutFrequency = WorkoutFrequency.THREE_DAYS

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be blank")
        return value.strip()

    @field_validator("age")
    @classmethod
    def _age_is_numeric(cls, value: str) -> str:
        value = value.strip()
        if not (value.isascii() and value.isdigit()):
            raise ValueError("age must be a whole number")
        if not 1 <= int(value) <= 120:
            raise ValueError("age must be between 1 and 120")
        return value

    def to_profile(self) -> UserProfile:
        restrictions = [r.strip() for r in self.restrictions.split(",") if r.strip()]
        return UserProfile(
            name=self.name,
            age=int(self.age),
            fitness_level=self.fitness_level,
            # de-duplicate while keeping the selection order
            goals=list(dict.fromkeys(self.goals)),
            restrictions=restrictions,
            preferred_workout_types=list(dict.fromkeys(self.preferred_workout_types)),
            available_equipment=list(dict.fromkeys(self.available_equipment)),
            workout_frequency=self.workout_frequency,
        )
