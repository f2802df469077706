"""Motivational copy shown at each phase of a workout."""

import random
from typing import Optional, Sequence

READY_TO_WORKOUT: tuple[str, ...] = (
    "Are you ready to be your best self?",
    "Let's crush this workout!",
    "Time to show yourself what you're made of!",
    "Ready to unleash your potential?",
    "Let's make today count!",
    "Time to rise and grind!",
    "Ready to push your limits?",
    "Let's turn effort into results!",
    "Time to be unstoppable!",
    "Ready to dominate this workout?",
)

DURING_WORKOUT: tuple[str, ...] = (
    "YOU GOT THIS!",
    "PUSH HARDER!",
    "DON'T QUIT NOW!",
    "YOU'RE STRONGER!",
    "KEEP GOING!",
    "GIVE IT YOUR ALL!",
    "YOU'RE UNSTOPPABLE!",
    "FIGHT FOR IT!",
    "DIG DEEP!",
    "FINISH STRONG!",
)

REST_PERIOD: tuple[str, ...] = (
    "Take a little rest before your next set. You earned it.",
    "Great work! Take a breather, you've earned it.",
    "Nice job! Rest up for the next round.",
    "You're crushing it! Take a moment to recover.",
    "Keep it up! Time to rest and recharge.",
    "Excellent work! Breathe and prepare for more.",
    "You're doing great! Rest and come back stronger.",
    "Take a breather, you're making progress.",
    "Well done! Time to reset and go again.",
    "Stay focused! Rest now, dominate next.",
)

TIME_TO_START: tuple[str, ...] = (
    "Time to start the next lift, let's do this.",
    "Rest time's up! Let's get back to work!",
    "Ready to crush the next set? Let's go!",
    "Time to push yourself again! You got this!",
    "Let's keep the momentum going!",
    "Rest is over! Time to dominate!",
    "Ready to push your limits again? Let's go!",
    "Back to work! Let's make it count!",
    "Time to channel your inner beast! Let's do this!",
    "Rested and ready! Let's crush this!",
)

WORKOUT_COMPLETE = "Workout complete! See you tomorrow."


def pick(messages: Sequence[str], rng: Optional[random.Random] = None) -> str:
    return (rng or random).choice(messages)
